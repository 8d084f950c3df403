"""Lookup tables for HTML to Plain conversion.

This module defines the static, read-only tables the converter consults when
turning markup into Plain calls. Every table is a plain dict or frozenset so
lookups stay O(1) and nothing is mutated at runtime.

Usage:
    from plainkit_converter.constants import TAG_FUNCTIONS, STANDARD_ATTRIBUTES

References:
    - https://html.spec.whatwg.org/multipage/indices.html#elements-3
    - https://htmx.org/reference/#attributes
    - https://alpinejs.dev/directives/data
"""

# Go import paths
HTML_IMPORT = "github.com/plainkit/html"
HTMX_IMPORT = "github.com/plainkit/htmx"
ALPINE_IMPORT = "github.com/plainkit/alpine"

# Emission order of the import block, independent of discovery order
IMPORT_ORDER = (HTML_IMPORT, HTMX_IMPORT, ALPINE_IMPORT)

# Package qualifier used in generated code -> import path
QUALIFIED_IMPORTS = {
    "htmx": HTMX_IMPORT,
    "alpine": ALPINE_IMPORT,
}

# Generated entry points
PAGE_FUNCTION = "Page"
COMPONENT_FUNCTION = "Component"
COMPONENTS_FUNCTION = "Components"

TEXT_FUNCTION = "T"
CUSTOM_FUNCTION = "Custom"

# Formatting policy
INDENT = "\t"
MAX_INLINE_ARGS = 3
MAX_INLINE_WIDTH = 80

# Values longer than this (in UTF-8 bytes) that look like script are emitted
# as raw backtick literals.
RAW_LITERAL_MIN_LENGTH = 50
RAW_LITERAL_MARKERS = ("{", "function")

# Structural containers the parser may synthesize around a fragment
WRAPPER_ELEMENTS = frozenset({"html", "head", "body"})

# Tag name -> Plain element function.
# title and label are resolved from their ancestors and are not listed here.
TAG_FUNCTIONS = {
    "a": "A",
    "abbr": "Abbr",
    "address": "Address",
    "area": "Area",
    "article": "Article",
    "aside": "Aside",
    "audio": "Audio",
    "b": "B",
    "base": "Base",
    "bdi": "Bdi",
    "bdo": "Bdo",
    "blockquote": "Blockquote",
    "body": "Body",
    "br": "Br",
    "button": "Button",
    "canvas": "Canvas",
    "caption": "Caption",
    "cite": "Cite",
    "code": "Code",
    "col": "Col",
    "colgroup": "ColGroup",
    "data": "Data",
    "datalist": "Datalist",
    "dd": "Dd",
    "del": "Del",
    "details": "Details",
    "dfn": "Dfn",
    "dialog": "Dialog",
    "div": "Div",
    "dl": "Dl",
    "dt": "Dt",
    "em": "Em",
    "embed": "Embed",
    "fieldset": "Fieldset",
    "figcaption": "Figcaption",
    "figure": "Figure",
    "footer": "Footer",
    "form": "Form",
    "h1": "H1",
    "h2": "H2",
    "h3": "H3",
    "h4": "H4",
    "h5": "H5",
    "h6": "H6",
    "head": "Head",
    "header": "Header",
    "hgroup": "Hgroup",
    "hr": "Hr",
    "html": "Html",
    "i": "I",
    "iframe": "Iframe",
    "img": "Img",
    "input": "Input",
    "ins": "Ins",
    "kbd": "Kbd",
    "legend": "Legend",
    "li": "Li",
    "link": "Link",
    "main": "Main",
    "map": "Map",
    "mark": "Mark",
    "menu": "Menu",
    "meta": "Meta",
    "meter": "Meter",
    "nav": "Nav",
    "noscript": "Noscript",
    "object": "Object",
    "ol": "Ol",
    "optgroup": "OptGroup",
    "option": "Option",
    "output": "Output",
    "p": "P",
    "param": "Param",
    "picture": "Picture",
    "pre": "Pre",
    "progress": "Progress",
    "q": "Q",
    "rp": "Rp",
    "rt": "Rt",
    "ruby": "Ruby",
    "s": "S",
    "samp": "Samp",
    "script": "Script",
    "search": "Search",
    "section": "Section",
    "select": "Select",
    "slot": "Slot",
    "small": "Small",
    "source": "Source",
    "span": "Span",
    "strong": "Strong",
    "style": "Style",
    "sub": "Sub",
    "summary": "Summary",
    "sup": "Sup",
    "table": "Table",
    "tbody": "Tbody",
    "td": "Td",
    "template": "Template",
    "textarea": "Textarea",
    "tfoot": "Tfoot",
    "th": "Th",
    "thead": "Thead",
    "time": "Time",
    "tr": "Tr",
    "track": "Track",
    "u": "U",
    "ul": "Ul",
    "var": "Var",
    "video": "Video",
    "wbr": "Wbr",
}

# tag -> (ancestor tag, function inside ancestor, function elsewhere)
CONTEXT_TAGS = {
    "title": ("head", "HeadTitle", "Title"),
    "label": ("form", "FormLabel", "Label"),
}

# Standard attributes taking a single value
STANDARD_ATTRIBUTES = {
    "class": "Class",
    "id": "Id",
    "style": "Style",
    "href": "Href",
    "src": "Src",
    "type": "Type",
    "value": "Value",
    "name": "Name",
    "placeholder": "Placeholder",
    "charset": "Charset",
    "content": "Content",
    "method": "Method",
    "action": "Action",
    "target": "Target",
    "rel": "Rel",
    "alt": "Alt",
    "title": "Title",
    "width": "Width",
    "height": "Height",
    "colspan": "ColSpan",
    "rowspan": "RowSpan",
    "for": "For",
    "maxlength": "MaxLength",
    "minlength": "MinLength",
    "min": "Min",
    "max": "Max",
    "step": "Step",
    "pattern": "Pattern",
    "rows": "Rows",
    "cols": "Cols",
    "autocomplete": "AutoComplete",
    "role": "Role",
    "tabindex": "TabIndex",
}

# (tag, attribute) pairs whose function differs from STANDARD_ATTRIBUTES
TAG_SPECIFIC_ATTRIBUTES = {
    ("script", "src"): "ScriptSrc",
    ("input", "type"): "InputType",
    ("button", "type"): "ButtonType",
    ("input", "value"): "InputValue",
    ("input", "name"): "InputName",
}

# Presence-only attributes, emitted without arguments
BOOLEAN_ATTRIBUTES = {
    "disabled": "Disabled",
    "checked": "Checked",
    "readonly": "ReadOnly",
    "required": "Required",
    "multiple": "Multiple",
    "selected": "Selected",
    "defer": "Defer",
    "async": "Async",
    "autofocus": "Autofocus",
}

# Prefix -> two-argument function receiving the stripped key
PREFIXED_ATTRIBUTES = (
    ("data-", "Data"),
    ("aria-", "Aria"),
)

# htmx
HTMX_PREFIX = "hx-"

HTMX_ATTRIBUTES = {
    "hx-get": "HxGet",
    "hx-post": "HxPost",
    "hx-put": "HxPut",
    "hx-patch": "HxPatch",
    "hx-delete": "HxDelete",
    "hx-trigger": "HxTrigger",
    "hx-target": "HxTarget",
    "hx-swap": "HxSwap",
    "hx-swap-oob": "HxSwapOob",
    "hx-indicator": "HxIndicator",
    "hx-push-url": "HxPushUrl",
    "hx-replace-url": "HxReplaceUrl",
    "hx-select": "HxSelect",
    "hx-select-oob": "HxSelectOob",
    "hx-vals": "HxVals",
    "hx-headers": "HxHeaders",
    "hx-include": "HxInclude",
    "hx-params": "HxParams",
    "hx-confirm": "HxConfirm",
    "hx-prompt": "HxPrompt",
    "hx-validate": "HxValidate",
    "hx-disabled-elt": "HxDisabledElt",
    "hx-ext": "HxExt",
    "hx-boost": "HxBoost",
    "hx-preserve": "HxPreserve",
    "hx-sse": "HxSse",
    "hx-ws": "HxWs",
    "hx-sync": "HxSync",
    "hx-encoding": "HxEncoding",
    "hx-disinherit": "HxDisinherit",
}

HTMX_BOOLEAN_ATTRIBUTES = frozenset({"hx-boost", "hx-preserve", "hx-validate"})

TRUE_LITERAL = "true"

# Alpine.js
ALPINE_DIRECTIVE_PREFIX = "x-"
ALPINE_EVENT_PREFIX = "@"
ALPINE_BIND_PREFIX = ":"

ALPINE_ON_PREFIX = "x-on:"
ALPINE_XBIND_PREFIX = "x-bind:"
ALPINE_DEBOUNCE_PREFIX = "x-model.debounce"

ALPINE_DIRECTIVES = {
    "x-data": "XData",
    "x-init": "XInit",
    "x-show": "XShow",
    "x-if": "XIf",
    "x-for": "XFor",
    "x-html": "XHtml",
    "x-text": "XText",
    "x-model": "XModel",
    "x-modelable": "XModelable",
    "x-effect": "XEffect",
    "x-ref": "XRef",
    "x-teleport": "XTeleport",
    "x-ignore": "XIgnore",
    "x-id": "XId",
    "x-cloak": "XCloak",
    "x-transition": "XTransition",
    "x-transition:enter": "XTransitionEnter",
    "x-transition:enter-start": "XTransitionEnterStart",
    "x-transition:enter-end": "XTransitionEnterEnd",
    "x-transition:leave": "XTransitionLeave",
    "x-transition:leave-start": "XTransitionLeaveStart",
    "x-transition:leave-end": "XTransitionLeaveEnd",
    "x-model.lazy": "XModelLazy",
    "x-model.number": "XModelNumber",
}

# Directives that take no expression
ALPINE_NO_ARG_DIRECTIVES = frozenset({"x-cloak", "x-ignore", "x-transition"})

ALPINE_EVENTS = {
    "click": "AtClick",
    "submit": "AtSubmit",
    "change": "AtChange",
    "input": "AtInput",
    "keydown": "AtKeydown",
    "keyup": "AtKeyup",
    "mouseenter": "AtMouseenter",
    "mouseleave": "AtMouseleave",
}

# "event.modifiers" -> function; exact match only
ALPINE_EVENT_MODIFIERS = {
    "click.away": "AtClickAway",
    "click.outside": "AtClickOutside",
    "click.prevent": "AtClickPrevent",
    "click.stop": "AtClickStop",
    "submit.prevent": "AtSubmitPrevent",
    "keydown.escape": "AtKeydownEscape",
    "keydown.enter": "AtKeydownEnter",
    "keydown.window": "AtKeydownWindow",
}

ALPINE_BINDINGS = {
    "class": "ColonClass",
    "style": "ColonStyle",
    "disabled": "ColonDisabled",
    "value": "ColonValue",
}
