from __future__ import annotations

import json
import tempfile
import unittest
from pathlib import Path

from iconsprites.errors import OptionsError
from iconsprites.options import DEFAULT_INCLUDE, load_options, options_from_dict


def base_config() -> dict:
    return {
        "sprites": [
            {"name": "icons-a", "source_folder": "icons/a"},
            {"name": "icons-b", "source_folder": "icons/b", "include": r"\.svg$"},
        ],
        "padding": 2,
        "target_folder": {"icons": "out/img", "scss": "out/scss", "ts": "out/ts"},
        "classes": {"base": "icon", "sprite": "sprite", "size": "size", "icon": "i"},
        "url": "/img/#SPRITE_FILE",
    }


class OptionsTests(unittest.TestCase):
    def test_loads_and_resolves_relative_paths(self) -> None:
        with tempfile.TemporaryDirectory() as td:
            root = Path(td).resolve()
            config_path = root / "sprites.json"
            config_path.write_text(json.dumps(base_config()), encoding="utf-8")

            options = load_options(config_path)

        self.assertEqual(options.padding, 2)
        self.assertEqual(options.sprites[0].source_folder, root / "icons/a")
        self.assertIs(options.sprites[0].include, DEFAULT_INCLUDE)
        self.assertTrue(options.sprites[1].include.search("Logo.SVG"))
        self.assertEqual(options.target_folder.scss, root / "out/scss")
        self.assertEqual(options.helper_module, "common/sprite")

    def test_duplicate_names_are_rejected(self) -> None:
        config = base_config()
        config["sprites"][1]["name"] = "icons-a"
        with self.assertRaises(OptionsError) as ctx:
            options_from_dict(config)
        self.assertIn("sprite name 'icons-a' is used more than once", ctx.exception.problems)

    def test_url_needs_exactly_one_placeholder(self) -> None:
        for url in ("/img/sprite.png", "/#SPRITE_FILE/#SPRITE_FILE"):
            config = base_config()
            config["url"] = url
            with self.assertRaises(OptionsError) as ctx:
                options_from_dict(config)
            self.assertTrue(any("exactly once" in p for p in ctx.exception.problems))

    def test_all_problems_are_reported_together(self) -> None:
        config = base_config()
        config["padding"] = -1
        config["classes"]["icon"] = ""
        config["url"] = "/img/"
        with self.assertRaises(OptionsError) as ctx:
            options_from_dict(config)
        self.assertEqual(len(ctx.exception.problems), 3)

    def test_missing_key_is_reported(self) -> None:
        config = base_config()
        del config["target_folder"]["ts"]
        with self.assertRaises(OptionsError) as ctx:
            options_from_dict(config)
        self.assertIn("target_folder is missing required key 'ts'", ctx.exception.problems)

    def test_invalid_include_pattern(self) -> None:
        config = base_config()
        config["sprites"][0]["include"] = "("
        with self.assertRaises(OptionsError):
            options_from_dict(config)

    def test_sprite_entry_must_be_an_object(self) -> None:
        config = base_config()
        config["sprites"][1] = 7
        with self.assertRaises(OptionsError) as ctx:
            options_from_dict(config)
        self.assertEqual(ctx.exception.problems, ["sprites[1] must be an object"])

    def test_padding_must_be_a_whole_number(self) -> None:
        for padding in ("2", 1.5, True):
            config = base_config()
            config["padding"] = padding
            with self.assertRaises(OptionsError) as ctx:
                options_from_dict(config)
            self.assertTrue(ctx.exception.problems[0].startswith("padding must be a whole number"))

    def test_source_folder_must_be_a_string(self) -> None:
        config = base_config()
        config["sprites"][0]["source_folder"] = ["icons"]
        with self.assertRaises(OptionsError) as ctx:
            options_from_dict(config)
        self.assertIn("sprites[0].source_folder must be a path string", ctx.exception.problems)

    def test_options_error_is_value_error(self) -> None:
        self.assertTrue(issubclass(OptionsError, ValueError))


if __name__ == "__main__":
    unittest.main()
