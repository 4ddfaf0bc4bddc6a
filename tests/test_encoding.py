import re
from urllib.parse import unquote

from django.test import SimpleTestCase

from django_lti_validator.encoding import encode

UNRESERVED_OR_ESCAPED = re.compile(r"^[A-Za-z0-9\-._~%]*$")


class EncodeTest(SimpleTestCase):
    def test_unreserved_characters_pass_through(self):
        value = "AZaz09-._~"
        self.assertEqual(encode(value), value)

    def test_space_is_percent_encoded(self):
        self.assertEqual(encode("some data"), "some%20data")

    def test_reserved_characters_are_encoded_uppercase(self):
        self.assertEqual(encode("^$last_!data"), "%5E%24last_%21data")
        self.assertEqual(encode("--some*data"), "--some%2Adata")
        self.assertEqual(
            encode("http://photos.example.net/photos"),
            "http%3A%2F%2Fphotos.example.net%2Fphotos",
        )
        self.assertEqual(encode("a+b=c&d"), "a%2Bb%3Dc%26d")

    def test_non_ascii_is_encoded_as_utf8(self):
        self.assertEqual(encode("café"), "caf%C3%A9")

    def test_empty_string(self):
        self.assertEqual(encode(""), "")

    def test_non_string_is_coerced(self):
        self.assertEqual(encode(1191242096), "1191242096")

    def test_output_alphabet_and_decoding(self):
        samples = [
            "plain",
            "with space",
            "!*'();:@&=+$,/?#[]",
            "quote\"backslash\\tab\t",
            "ünicøde ☃ \U0001f600",
            "%already%20encoded",
        ]
        for sample in samples:
            encoded = encode(sample)
            self.assertRegex(encoded, UNRESERVED_OR_ESCAPED)
            self.assertEqual(unquote(encoded), sample)

    def test_decoding_recovers_every_code_point(self):
        for code_point in range(0x20, 0x3000):
            char = chr(code_point)
            encoded = encode(char)
            self.assertRegex(encoded, UNRESERVED_OR_ESCAPED)
            self.assertEqual(unquote(encoded), char)

    def test_lone_surrogate_is_rejected(self):
        with self.assertRaises(UnicodeEncodeError):
            encode("\ud800")
