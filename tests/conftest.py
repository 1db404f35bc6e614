"""Pytest configuration and shared fixtures."""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

FIXTURES = Path(__file__).parent / "fixtures"


@pytest.fixture
def fixtures_dir():
    """Return the directory holding sample JSON5-lite documents."""
    return FIXTURES


@pytest.fixture
def settings_file(tmp_path):
    """Copy settings.json5 into a temp dir (cache files land next to it)."""
    target = tmp_path / "settings.json5"
    target.write_bytes((FIXTURES / "settings.json5").read_bytes())
    return target


@pytest.fixture
def strip_cases():
    """Return (input, expected) pairs covering comments, strings and commas."""
    return {
        "without comment": ('{"a":1,"b":2}', '{"a":1,"b":2}'),
        "with trail only": ('{"a":1,"b":2,,}', '{"a":1,"b":2}'),
        "single line comment": (
            '{"a":1,\n\t\t\t// comment\n\t\t\t\t"b":2,\n\t\t\t// comment\n\t\t\t\t"c":3,,}',
            '{"a":1,\n\t\t\t\t"b":2,\n\t\t\t\t"c":3}',
        ),
        "single line comment at end": (
            '{"a":1,\n\t\t\t\t"b":2,// comment\n\t\t\t\t"c":[1,2,,]}',
            '{"a":1,\n\t\t\t\t"b":2,\n\t\t\t\t"c":[1,2]}',
        ),
        "real multiline comment": (
            '{"a":1,\n\t\t\t/*\n\t\t\t * comment\n\t\t\t */\n\t\t\t"b":2, "c":3,}',
            '{"a":1,\n\t\t\t\n\t\t\t"b":2, "c":3}',
        ),
        "inline multiline comment": (
            '{"a":1,\n\t\t\t\t/* comment */"b":2, "c":3}',
            '{"a":1,\n\t\t\t\t"b":2, "c":3}',
        ),
        "inline multiline comment at end": (
            '{"a":1, "b":2, "c":3/* comment */,}',
            '{"a":1, "b":2, "c":3}',
        ),
        "comment inside string": (
            '{"a": "a//b", "b":"a/* not really comment */b"}',
            '{"a": "a//b", "b":"a/* not really comment */b"}',
        ),
        "escaped string": (
            r'{"a": "a//b", "b":"a/* \"not really comment\" */b"}',
            r'{"a": "a//b", "b":"a/* \"not really comment\" */b"}',
        ),
        "string inside comment": (
            '{"a": "ab", /* also comment */ "b":"a/* not a comment */b" /* "comment string" */ }',
            '{"a": "ab",  "b":"a/* not a comment */b"  }',
        ),
        "literal lf": (
            '{"a":/*literal linefeed*/"apple\n' r'ball","b":"","c\\\\":"",}',
            r'{"a":"apple\nball","b":"","c\\\\":""}',
        ),
        "nested subjson": (
            "{\n"
            '\t\t\t\t"jo": "{/* comment */\\"url\\": \\"http://example.com\\"//comment\n'
            '\t\t\t\t}",\n'
            '\t\t\t\t"x": {\n'
            "\t\t\t\t/* comment 1\n"
            "\t\t\t\t\tcomment 2 */\n"
            '\t\t\t\t\t"y": {\n'
            "\t\t\t\t\t\t// comment\n"
            '\t\t\t\t\t\t"XY\\\\": "//no comment/*",\n'
            "\t\t\t\t\t},\n"
            "\t\t\t\t}\n"
            "\t\t\t}",
            "{\n"
            '\t\t\t\t"jo": "{/* comment */\\"url\\": \\"http://example.com\\"//comment\\n\\t\\t\\t\\t}",\n'
            '\t\t\t\t"x": {\n'
            "\t\t\t\t\n"
            '\t\t\t\t\t"y": {\n'
            '\t\t\t\t\t\t"XY\\\\": "//no comment/*"\n'
            "\t\t\t\t\t}\n"
            "\t\t\t\t}\n"
            "\t\t\t}",
        ),
        "with gap": (
            '{/*\n\t\t\t\t?"\\" */\n\t\t\t\t" a " : 1 ,\n'
            '\t\t\t\t" // " :  " : //" // :, \\" ",,\n\t\t\t}',
            '{\n\t\t\t\t" a " : 1 ,\n\t\t\t\t" // " :  " : //"\n\t\t\t}',
        ),
    }


@pytest.fixture
def clear_config_cache(monkeypatch, tmp_path):
    """Isolate config: no env overrides, empty cwd, fresh cache."""
    from lib.config import clear_cache

    for name in ("JSONC_CONFIG", "JSONC_CACHE_SUFFIX", "JSONC_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    clear_cache()
    yield
    clear_cache()
