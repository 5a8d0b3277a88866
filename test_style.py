"""Tests for inline style parsing and the bounded style cache."""

from rich_text.style import (
    MAX_STYLE_CACHE_ENTRIES,
    StyleCache,
    get_default_cache,
    parse_style,
    style_to_css,
    to_camel_case,
)


def test_parses_declarations_with_camel_case_and_custom_properties():
    cache = StyleCache()
    result = parse_style("color: red; --x: 1; margin-top : 2px", cache)
    assert result == {"color": "red", "--x": "1", "marginTop": "2px"}


def test_empty_and_blank_input_yield_empty_map():
    cache = StyleCache()
    assert parse_style("", cache) == {}
    assert parse_style("   ", cache) == {}
    assert len(cache) == 0


def test_equal_inputs_after_trimming_give_equal_maps():
    cache = StyleCache()
    first = parse_style("  font-size: 12px  ", cache)
    second = parse_style("font-size: 12px", cache)
    assert first == second
    assert first is second
    assert cache.get("font-size: 12px") is first


def test_malformed_declarations_are_skipped():
    cache = StyleCache()
    result = parse_style("color red; : 4px; ;; padding: 0;", cache)
    assert result == {"padding": "0"}


def test_value_keeps_text_after_first_colon():
    cache = StyleCache()
    result = parse_style("background: url(https://example.com/a.png)", cache)
    assert result == {"background": "url(https://example.com/a.png)"}


def test_custom_property_names_are_not_camel_cased():
    cache = StyleCache()
    result = parse_style("--brand-color: #fff; -webkit-line-clamp: 2", cache)
    assert result == {"--brand-color": "#fff", "WebkitLineClamp": "2"}


def test_to_camel_case():
    assert to_camel_case("border-top-left-radius") == "borderTopLeftRadius"
    assert to_camel_case("color") == "color"


def test_cache_evicts_first_inserted_entry_not_least_recently_used():
    cache = StyleCache()
    styles = [f"width: {i}px" for i in range(MAX_STYLE_CACHE_ENTRIES)]
    for style in styles:
        parse_style(style, cache)
    assert len(cache) == MAX_STYLE_CACHE_ENTRIES

    # Reading the oldest entry does not protect it
    parse_style(styles[0], cache)
    parse_style("width: 9999px", cache)

    assert len(cache) == MAX_STYLE_CACHE_ENTRIES
    assert styles[0] not in cache
    assert styles[1] in cache
    assert "width: 9999px" in cache
    assert cache.keys()[-1] == "width: 9999px"


def test_evicted_entry_is_reparsed_correctly():
    cache = StyleCache(max_entries=2)
    parse_style("top: 1px", cache)
    parse_style("top: 2px", cache)
    parse_style("top: 3px", cache)
    assert parse_style("top: 1px", cache) == {"top": "1px"}
    assert cache.keys() == ["top: 3px", "top: 1px"]


def test_default_cache_is_shared():
    assert get_default_cache() is get_default_cache()
    result = parse_style("line-height: 1.5")
    assert "line-height: 1.5" in get_default_cache()
    assert result == {"lineHeight": "1.5"}


def test_style_to_css_round_trips_property_names():
    css = style_to_css({"marginTop": "2px", "--x": "1", "WebkitLineClamp": "2"})
    assert css == "margin-top: 2px; --x: 1; -webkit-line-clamp: 2"
