from __future__ import annotations

import unittest

from plainkit_converter.attributes import AttributeMapper
from plainkit_converter.constants import ALPINE_IMPORT, HTMX_IMPORT
from plainkit_converter.imports import ImportSet


def make_mapper(htmx: bool = False, alpine: bool = False) -> AttributeMapper:
    return AttributeMapper(htmx=htmx, alpine=alpine, imports=ImportSet())


class TestStandardAttributes(unittest.TestCase):
    def setUp(self) -> None:
        self.mapper = make_mapper()

    def test_single_value_attributes(self) -> None:
        assert self.mapper.convert("class", "container", "div") == 'Class("container")'
        assert self.mapper.convert("id", "main", "div") == 'Id("main")'
        assert self.mapper.convert("colspan", "2", "td") == 'ColSpan("2")'
        assert self.mapper.convert("autocomplete", "off", "input") == 'AutoComplete("off")'
        assert self.mapper.convert("tabindex", "-1", "div") == 'TabIndex("-1")'

    def test_tag_specific_attributes(self) -> None:
        assert self.mapper.convert("type", "email", "input") == 'InputType("email")'
        assert self.mapper.convert("type", "submit", "button") == 'ButtonType("submit")'
        assert self.mapper.convert("type", "text/css", "style") == 'Type("text/css")'
        assert self.mapper.convert("value", "42", "input") == 'InputValue("42")'
        assert self.mapper.convert("value", "42", "option") == 'Value("42")'
        assert self.mapper.convert("name", "email", "input") == 'InputName("email")'
        assert self.mapper.convert("name", "viewport", "meta") == 'Name("viewport")'
        assert self.mapper.convert("src", "/app.js", "script") == 'ScriptSrc("/app.js")'
        assert self.mapper.convert("src", "/logo.png", "img") == 'Src("/logo.png")'

    def test_boolean_attributes_take_no_argument(self) -> None:
        for key, function in [
            ("disabled", "Disabled"),
            ("checked", "Checked"),
            ("required", "Required"),
            ("readonly", "ReadOnly"),
            ("multiple", "Multiple"),
            ("selected", "Selected"),
            ("autofocus", "Autofocus"),
            ("defer", "Defer"),
            ("async", "Async"),
        ]:
            assert self.mapper.convert(key, "", "input") == f"{function}()"

    def test_data_and_aria_prefixes_are_stripped(self) -> None:
        assert self.mapper.convert("data-user-id", "7", "div") == 'Data("user-id", "7")'
        assert self.mapper.convert("aria-label", "Close", "button") == 'Aria("label", "Close")'

    def test_unknown_attribute_falls_back_to_custom(self) -> None:
        assert self.mapper.convert("onclick", "go()", "div") == 'Custom("onclick", "go()")'
        assert self.mapper.convert("contenteditable", "", "div") == 'Custom("contenteditable", "")'

    def test_none_value_is_empty(self) -> None:
        assert self.mapper.convert("href", None, "a") == 'Href("")'

    def test_framework_prefixes_are_custom_when_disabled(self) -> None:
        assert self.mapper.convert("hx-get", "/api/data", "button") == 'Custom("hx-get", "/api/data")'
        assert self.mapper.convert("x-data", "{}", "div") == 'Custom("x-data", "{}")'
        assert self.mapper.convert("@click", "go()", "div") == 'Custom("@click", "go()")'
        assert self.mapper.convert(":class", "c", "div") == 'Custom(":class", "c")'
        assert list(self.mapper.imports) == ["github.com/plainkit/html"]


class TestHtmxAttributes(unittest.TestCase):
    def setUp(self) -> None:
        self.mapper = make_mapper(htmx=True)

    def test_value_attributes(self) -> None:
        assert self.mapper.convert("hx-get", "/api/data", "button") == 'htmx.HxGet("/api/data")'
        assert self.mapper.convert("hx-push-url", "true", "a") == 'htmx.HxPushUrl("true")'
        assert self.mapper.convert("hx-swap-oob", "true", "div") == 'htmx.HxSwapOob("true")'
        assert self.mapper.convert("hx-disabled-elt", "this", "form") == 'htmx.HxDisabledElt("this")'
        assert HTMX_IMPORT in self.mapper.imports

    def test_boolean_attributes(self) -> None:
        assert self.mapper.convert("hx-boost", "true", "body") == "htmx.HxBoost()"
        assert self.mapper.convert("hx-boost", "false", "body") == "htmx.HxBoost(false)"
        assert self.mapper.convert("hx-preserve", "", "div") == "htmx.HxPreserve(false)"
        assert self.mapper.convert("hx-validate", "true", "form") == "htmx.HxValidate()"

    def test_unknown_htmx_attribute_is_custom_with_import(self) -> None:
        assert self.mapper.convert("hx-frobnicate", "yes", "div") == 'Custom("hx-frobnicate", "yes")'
        assert HTMX_IMPORT in self.mapper.imports

    def test_standard_attributes_add_no_import(self) -> None:
        self.mapper.convert("class", "btn", "button")
        assert HTMX_IMPORT not in self.mapper.imports

    def test_standard_attributes_are_unaffected(self) -> None:
        assert self.mapper.convert("class", "btn", "button") == 'Class("btn")'

    def test_alpine_stays_disabled(self) -> None:
        assert self.mapper.convert("x-show", "open", "div") == 'Custom("x-show", "open")'
        assert ALPINE_IMPORT not in self.mapper.imports


class TestAlpineAttributes(unittest.TestCase):
    def setUp(self) -> None:
        self.mapper = make_mapper(alpine=True)

    def test_directives(self) -> None:
        assert self.mapper.convert("x-data", "{ open: false }", "div") == 'alpine.XData("{ open: false }")'
        assert self.mapper.convert("x-show", "open", "div") == 'alpine.XShow("open")'
        assert self.mapper.convert("x-model.lazy", "q", "input") == 'alpine.XModelLazy("q")'
        assert (
            self.mapper.convert("x-transition:enter-start", "opacity-0", "div")
            == 'alpine.XTransitionEnterStart("opacity-0")'
        )
        assert ALPINE_IMPORT in self.mapper.imports

    def test_no_argument_directives(self) -> None:
        assert self.mapper.convert("x-cloak", "", "div") == "alpine.XCloak()"
        assert self.mapper.convert("x-ignore", "", "div") == "alpine.XIgnore()"
        assert self.mapper.convert("x-transition", "", "div") == "alpine.XTransition()"

    def test_colon_qualified_directives(self) -> None:
        assert self.mapper.convert("x-on:click", "open = true", "button") == 'alpine.XOn("click", "open = true")'
        assert self.mapper.convert("x-bind:href", "url", "a") == 'alpine.XBind("href", "url")'

    def test_debounce_delay(self) -> None:
        assert (
            self.mapper.convert("x-model.debounce.500ms", "search", "input")
            == 'alpine.XModelDebounce("search", "500ms")'
        )

    def test_bare_debounce_is_custom(self) -> None:
        assert self.mapper.convert("x-model.debounce", "search", "input") == 'Custom("x-model.debounce", "search")'

    def test_unknown_directive_is_custom(self) -> None:
        assert self.mapper.convert("x-frobnicate", "1", "div") == 'Custom("x-frobnicate", "1")'
        assert ALPINE_IMPORT in self.mapper.imports

    def test_events(self) -> None:
        assert self.mapper.convert("@click", "open = !open", "button") == 'alpine.AtClick("open = !open")'
        assert self.mapper.convert("@mouseleave", "hide()", "div") == 'alpine.AtMouseleave("hide()")'
        assert self.mapper.convert("@scroll", "onScroll()", "div") == 'alpine.At("scroll", "onScroll()")'

    def test_event_modifiers(self) -> None:
        assert self.mapper.convert("@click.away", "open = false", "div") == 'alpine.AtClickAway("open = false")'
        assert self.mapper.convert("@submit.prevent", "save()", "form") == 'alpine.AtSubmitPrevent("save()")'
        assert self.mapper.convert("@keydown.escape", "close()", "div") == 'alpine.AtKeydownEscape("close()")'

    def test_unknown_event_modifier_keeps_full_key(self) -> None:
        assert self.mapper.convert("@click.prevent.stop", "go()", "a") == 'Custom("@click.prevent.stop", "go()")'
        assert self.mapper.convert("@scroll.window", "go()", "div") == 'Custom("@scroll.window", "go()")'
        assert ALPINE_IMPORT in self.mapper.imports

    def test_bindings(self) -> None:
        assert self.mapper.convert(":class", "{ active: on }", "div") == 'alpine.ColonClass("{ active: on }")'
        assert self.mapper.convert(":disabled", "busy", "button") == 'alpine.ColonDisabled("busy")'
        assert self.mapper.convert(":key", "item.id", "li") == 'alpine.Colon("key", "item.id")'
        assert self.mapper.convert(":href", "url", "a") == 'alpine.Colon("href", "url")'

    def test_script_values_use_raw_literals(self) -> None:
        value = "{ items: [], load() { fetch('/api/items').then(r => r.json()) } }"
        assert self.mapper.convert("x-data", value, "div") == f"alpine.XData(`{value}`)"

    def test_htmx_stays_disabled(self) -> None:
        assert self.mapper.convert("hx-get", "/x", "div") == 'Custom("hx-get", "/x")'
        assert HTMX_IMPORT not in self.mapper.imports


class TestTiers(unittest.TestCase):
    def test_tier_names(self) -> None:
        mapper = make_mapper(htmx=True, alpine=True)
        assert mapper.tier("hx-get") == "htmx"
        assert mapper.tier("x-data") == "alpine"
        assert mapper.tier("@click") == "alpine"
        assert mapper.tier(":class") == "alpine"
        assert mapper.tier("class") == "standard"

    def test_disabled_frameworks_fall_to_standard(self) -> None:
        mapper = make_mapper()
        assert mapper.tier("hx-get") == "standard"
        assert mapper.tier("x-data") == "standard"

    def test_default_import_set(self) -> None:
        mapper = AttributeMapper(htmx=True)
        mapper.convert("hx-post", "/save", "form")
        assert list(mapper.imports) == ["github.com/plainkit/html", "github.com/plainkit/htmx"]
