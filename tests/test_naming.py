from __future__ import annotations

import unittest

from iconsprites.naming import (
    background_offset,
    class_name,
    format_number,
    pascal_case,
    quote_ts,
    resolve_url,
    unique_identifiers,
)


class NamingTests(unittest.TestCase):
    def test_class_name_appends_index(self) -> None:
        self.assertEqual(class_name("sprite", 0), "sprite0")
        self.assertEqual(class_name("size", 32), "size32")

    def test_resolve_url_substitutes_sprite_file(self) -> None:
        self.assertEqual(resolve_url("/img/#SPRITE_FILE?v=1", "icons-a.png"), "/img/icons-a.png?v=1")

    def test_pascal_case(self) -> None:
        self.assertEqual(pascal_case("arrow-left"), "ArrowLeft")
        self.assertEqual(pascal_case("my_icon"), "MyIcon")
        self.assertEqual(pascal_case("closeButton"), "CloseButton")
        self.assertEqual(pascal_case("HTMLParser"), "HtmlParser")
        self.assertEqual(pascal_case("2fa"), "N2fa")
        self.assertEqual(pascal_case("---"), "Icon")

    def test_unique_identifiers_suffixes_collisions(self) -> None:
        self.assertEqual(
            unique_identifiers(["arrow-left", "arrow_left", "ArrowLeft2"]),
            ["ArrowLeft", "ArrowLeft2", "ArrowLeft22"],
        )

    def test_background_offset_renders_zero_without_unit(self) -> None:
        self.assertEqual(background_offset(0), "0")
        self.assertEqual(background_offset(0.0), "0")
        self.assertEqual(background_offset(16), "-16px")
        self.assertEqual(background_offset(2.5), "-2.5px")

    def test_format_number(self) -> None:
        self.assertEqual(format_number(16.0), "16")
        self.assertEqual(format_number(16.25), "16.25")

    def test_quote_ts_escapes(self) -> None:
        self.assertEqual(quote_ts("it's"), "'it\\'s'")
        self.assertEqual(quote_ts("a\\b"), "'a\\\\b'")


if __name__ == "__main__":
    unittest.main()
