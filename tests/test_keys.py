from swagger_model.core.keys import lower_first_uppers, make_key_mapper


class TestLowerFirstUppers:
    def test_single_capital(self):
        assert lower_first_uppers("Title") == "title"

    def test_camel_case_tail_unchanged(self):
        assert lower_first_uppers("TermsOfService") == "termsOfService"

    def test_acronym_followed_by_word(self):
        assert lower_first_uppers("HTTPStatus") == "httpStatus"
        assert lower_first_uppers("HTTPMethod") == "httpMethod"

    def test_all_caps(self):
        assert lower_first_uppers("URL") == "url"

    def test_no_leading_capitals(self):
        assert lower_first_uppers("apiKey") == "apiKey"
        assert lower_first_uppers("") == ""

    def test_digits_end_the_run(self):
        assert lower_first_uppers("OAUTH2") == "oauth2"


class TestMakeKeyMapper:
    def test_strips_prefix(self):
        assert make_key_mapper("_info")("_infoTitle") == "title"

    def test_acronym_after_prefix(self):
        assert make_key_mapper("_param")("_paramHTTPMethod") == "httpMethod"

    def test_constructor_tags(self):
        modifier = make_key_mapper("SecurityScheme")
        assert modifier("SecuritySchemeApiKey") == "apiKey"
        assert modifier("SecuritySchemeBasic") == "basic"

    def test_empty_prefix(self):
        assert make_key_mapper("")("BasePath") == "basePath"

    def test_over_strips_names_without_the_prefix(self):
        assert make_key_mapper("_info")("_paramName") == "mName"
