#!/usr/bin/env python3
"""
Random fuzzer for the HTML to Plain converter.
Generates invalid/malformed HTML, with htmx and Alpine.js attributes mixed in,
and checks that every conversion either produces a complete Go file or
raises ConversionError.
"""

import argparse
import random
import string
import sys
import time
import traceback

from plainkit_converter import ConversionError, Converter

TAGS = [
    "div", "span", "p", "a", "img", "table", "tr", "td", "th", "ul", "ol", "li",
    "form", "input", "button", "select", "option", "textarea", "script", "style",
    "head", "body", "html", "title", "meta", "link", "br", "hr", "h1", "h2", "h3",
    "label", "fieldset", "legend", "colgroup", "col", "optgroup", "template",
    "svg", "math", "pre", "code", "blockquote", "article", "section", "header",
    "footer", "nav", "aside", "main", "figure", "figcaption", "details", "summary",
    "dialog", "custom-element", "my-widget",
]

ATTRIBUTES = [
    "id", "class", "style", "href", "src", "alt", "title", "name", "value", "type",
    "for", "placeholder", "data-x", "data-user-id", "aria-label", "aria-hidden",
    "role", "tabindex", "disabled", "readonly", "checked", "selected", "required",
    "multiple", "autofocus", "defer", "async", "onclick", "contenteditable",
]

HTMX_ATTRIBUTES = [
    "hx-get", "hx-post", "hx-put", "hx-delete", "hx-target", "hx-swap",
    "hx-trigger", "hx-boost", "hx-preserve", "hx-validate", "hx-push-url",
    "hx-vals", "hx-unknown",
]

ALPINE_ATTRIBUTES = [
    "x-data", "x-show", "x-if", "x-for", "x-model", "x-text", "x-html", "x-cloak",
    "x-ignore", "x-transition", "x-transition:enter", "x-on:click", "x-on:custom",
    "x-bind:href", "x-model.debounce", "x-model.debounce.500ms", "x-unknown",
    "@click", "@submit", "@custom-event", "@click.away", "@click.outside",
    "@keydown.escape", "@click.prevent.stop", "@scroll.window",
    ":class", ":style", ":disabled", ":value", ":key", ":href",
]

SPECIAL_CHARS = [
    "\x00", "\x01", "\x0b", "\x0c", "\x7f",
    "\ufffd",
    "\u00a0",
    "\u2028", "\u2029",
    "\u200b", "\u200c", "\u200d",
    "\ufeff",
]

# Values that exercise the literal rendering rules
VALUES = [
    "",
    "true",
    "false",
    'say "hi"',
    "C:\\path\\to\\file",
    "`backtick`",
    "line one\nline two",
    "{ open: false, items: [], toggle() { this.open = !this.open } }",
    "function() { return document.querySelector('#target').value }",
    "caf\u00e9 \u2603 \U0001f600",
    "x" * 200,
]


def random_string(min_len=0, max_len=20):
    """Generate random ASCII string."""
    length = random.randint(min_len, max_len)
    return "".join(random.choices(string.ascii_letters + string.digits, k=length))


def random_whitespace():
    """Generate random whitespace (including weird ones)."""
    ws = [" ", "\t", "\n", "\r", "\f", ""]
    return "".join(random.choices(ws, k=random.randint(0, 5)))


def fuzz_tag_name():
    strategies = [
        lambda: random.choice(TAGS),
        lambda: random.choice(TAGS).upper(),
        lambda: random.choice(TAGS) + random_string(1, 5),
        lambda: random_string(1, 10),
        lambda: random.choice(TAGS) + "-" + random_string(1, 5),
    ]
    return random.choice(strategies)()


def fuzz_attribute():
    """Generate attributes from every tier, sometimes malformed."""
    name_strategies = [
        lambda: random.choice(ATTRIBUTES),
        lambda: random.choice(HTMX_ATTRIBUTES),
        lambda: random.choice(ALPINE_ATTRIBUTES),
        lambda: random_string(1, 15),
        lambda: "data-" + random_string(1, 8),
        lambda: "@" + random_string(1, 8) + "." + random_string(1, 5),
        lambda: ":" + random_string(1, 8),
        lambda: "x-" + random_string(1, 8),
        lambda: "hx-" + random_string(1, 8),
    ]

    value_strategies = [
        lambda: random_string(0, 50),
        lambda: random.choice(VALUES),
        lambda: random.choice(SPECIAL_CHARS) * random.randint(1, 10),
        lambda: "\n" * random.randint(1, 5) + random_string(),
    ]

    quote_styles = [
        ('="', '"'),
        ("='", "'"),
        ("=", ""),
        ("", ""),
        ('="', ""),
    ]

    name = random.choice(name_strategies)()
    value = random.choice(value_strategies)()
    quote_start, quote_end = random.choice(quote_styles)
    if quote_start == "=" and not value.strip():
        value = random_string(1, 10)

    return f"{name}{quote_start}{value}{quote_end}"


def fuzz_open_tag():
    tag = fuzz_tag_name()
    attrs = [fuzz_attribute() for _ in range(random.randint(0, 6))]
    attr_str = " ".join(attrs)
    closing = random.choice([">", "/>", ""])
    return f"<{tag}{random_whitespace()} {attr_str}{random_whitespace()}{closing}"


def fuzz_repeated_attributes():
    """Repeat one attribute name with different values."""
    content = random_string(1, 10)
    name = random.choice(ATTRIBUTES + HTMX_ATTRIBUTES + ALPINE_ATTRIBUTES)
    values = [random.choice(VALUES) for _ in range(random.randint(2, 4))]
    attrs = " ".join(f"{name}='{value}'" for value in values)
    return f"<div {attrs}>{content}</div>"


def fuzz_text():
    strategies = [
        lambda: random_string(1, 50),
        lambda: random.choice(VALUES),
        lambda: "".join(random.choices(SPECIAL_CHARS, k=random.randint(1, 10))),
        lambda: " " * random.randint(10, 100),
    ]
    return random.choice(strategies)()


def fuzz_nested_structure(depth=0, max_depth=10):
    """Generate nested (possibly invalid) structure."""
    if depth >= max_depth or random.random() < 0.3:
        return fuzz_text()

    tag = random.choice(TAGS)
    attrs = " ".join(fuzz_attribute() for _ in range(random.randint(0, 3)))
    children = [fuzz_nested_structure(depth + 1, max_depth) for _ in range(random.randint(0, 3))]
    content = "".join(children)

    if random.random() < 0.2:
        return f"<{tag} {attrs}>{content}"
    if random.random() < 0.1:
        return f"<{tag} {attrs}>{content}</{random.choice(TAGS)}>"
    return f"<{tag} {attrs}>{content}</{tag}>"


def fuzz_context_tags():
    """Generate title/label inside and outside their context ancestors."""
    content = random_string(1, 10)
    variants = [
        f"<head><title>{content}</title></head><body></body>",
        f"<title>{content}</title>",
        f"<form><label for='x'>{content}</label></form>",
        f"<form><div><fieldset><label>{content}</label></fieldset></div></form>",
        f"<label>{content}</label>",
        f"<svg><title>{content}</title></svg>",
    ]
    return random.choice(variants)


def fuzz_implicit_tags():
    content = random_string(1, 10)
    variants = [
        content,
        f"<p>{content}<p>{content}<p>{content}",
        f"<ul><li>{content}<li>{content}</ul>",
        f"<table><tr><td>{content}<td>{content}<tr><td>{content}</table>",
        f"<select><option>{content}<optgroup label='g'><option>{content}</select>",
        f"<table><colgroup><col></colgroup><tr><td>{content}</td></tr></table>",
        f"<html><body>{content}",
        f"<head></head><body>{content}</body>",
    ]
    return random.choice(variants)


def fuzz_deeply_nested():
    """Nesting well past the interpreter's default recursion limit."""
    depth = random.randint(1000, 1500)
    tag = random.choice(["div", "span", "section"])
    return f"<{tag}>" * depth + "content" + f"</{tag}>" * depth


def fuzz_many_attributes():
    num_attrs = random.randint(50, 200)
    tag = random.choice(TAGS)
    pool = ATTRIBUTES + HTMX_ATTRIBUTES + ALPINE_ATTRIBUTES
    return f"<{tag} " + " ".join(f"{random.choice(pool)}{i}='v{i}'" for i in range(num_attrs)) + ">"


def generate_fuzzed_html():
    """Generate a fuzzed document or fragment."""
    parts = []

    if random.random() < 0.2:
        parts.append("<!DOCTYPE html>")

    num_elements = random.randint(1, 15)
    for _ in range(num_elements):
        element_type = random.choices(
            [
                fuzz_open_tag,
                fuzz_text,
                fuzz_nested_structure,
                fuzz_context_tags,
                fuzz_implicit_tags,
                fuzz_repeated_attributes,
                fuzz_deeply_nested,
                fuzz_many_attributes,
            ],
            weights=[20, 12, 15, 5, 5, 5, 1, 2],
        )[0]
        parts.append(element_type())

    return "".join(parts)


def check_output(code, package="main"):
    """Return a problem description, or None if code is a complete Go file."""
    if not code.startswith(f"package {package}\n\nimport (\n"):
        return "missing package clause or import block"
    if not code.endswith("}\n"):
        return "output does not end with a closing brace"
    if "func Page() Node {" not in code and "func Component() Node {" not in code and (
        "func Components() []Node {" not in code
    ):
        return "no entry function"
    if "\n)\n\nfunc " not in code:
        return "import block not followed by the entry function"
    return None


def run_fuzzer(num_tests, seed=None, verbose=False, save_failures=False, htmx=True, alpine=True):
    """Run the fuzzer against the converter."""
    if seed is not None:
        random.seed(seed)

    converter = Converter(htmx=htmx, alpine=alpine)

    crashes = []
    invalid = []
    hangs = []
    rejected = 0
    successes = 0

    print(f"Fuzzing converter (htmx={htmx}, alpine={alpine}) with {num_tests} test cases...")
    start_time = time.time()

    for i in range(num_tests):
        html = generate_fuzzed_html()

        if verbose and i % 100 == 0:
            print(f"  Test {i}/{num_tests}...")

        try:
            start = time.perf_counter()
            code = converter.convert(html)
            elapsed = time.perf_counter() - start
        except ConversionError:
            # All-or-nothing: a typed error with no output is an allowed outcome
            rejected += 1
            continue
        except Exception as e:
            crashes.append({
                "test_num": i,
                "html": html,
                "error": str(e),
                "traceback": traceback.format_exc(),
            })
            if verbose:
                print(f"  CRASH: Test {i}: {e}")
            continue

        problem = check_output(code)
        if problem:
            invalid.append({"test_num": i, "html": html, "error": problem, "traceback": code})
            if verbose:
                print(f"  INVALID: Test {i}: {problem}")
        elif elapsed > 5.0:
            hangs.append({"test_num": i, "html": html, "time": elapsed})
            if verbose:
                print(f"  HANG: Test {i} took {elapsed:.2f}s")
        else:
            successes += 1

    elapsed_total = time.time() - start_time

    print(f"\n{'='*60}")
    print("FUZZING RESULTS: plainkit-converter")
    print(f"{'='*60}")
    print(f"Total tests:    {num_tests}")
    print(f"Successes:      {successes}")
    print(f"Rejected:       {rejected}")
    print(f"Crashes:        {len(crashes)}")
    print(f"Invalid output: {len(invalid)}")
    print(f"Hangs (>5s):    {len(hangs)}")
    print(f"Total time:     {elapsed_total:.2f}s")
    print(f"Tests/second:   {num_tests/elapsed_total:.1f}")

    failures = crashes + invalid
    if failures:
        print(f"\n{'='*60}")
        print("FAILURE DETAILS:")
        print(f"{'='*60}")
        for failure in failures[:10]:
            print(f"\nTest #{failure['test_num']}:")
            print(f"  HTML: {failure['html'][:200]!r}...")
            print(f"  Error: {failure['error']}")
        if len(failures) > 10:
            print(f"\n... and {len(failures) - 10} more failures")

    if hangs:
        print(f"\n{'='*60}")
        print("HANG DETAILS:")
        print(f"{'='*60}")
        for hang in hangs[:5]:
            print(f"\nTest #{hang['test_num']} ({hang['time']:.2f}s):")
            print(f"  HTML: {hang['html'][:200]!r}...")

    if save_failures and (failures or hangs):
        filename = f"fuzz_failures_{int(time.time())}.txt"
        with open(filename, "w", encoding="utf-8") as f:
            f.write("Fuzzing results for plainkit-converter\n")
            f.write(f"Seed: {seed}\n\n")
            for failure in failures:
                f.write(f"=== FAILURE #{failure['test_num']} ===\n")
                f.write(f"HTML:\n{failure['html']}\n")
                f.write(f"Error: {failure['error']}\n")
                f.write(f"Details:\n{failure['traceback']}\n\n")
            for hang in hangs:
                f.write(f"=== HANG #{hang['test_num']} ({hang['time']:.2f}s) ===\n")
                f.write(f"HTML:\n{hang['html']}\n\n")
        print(f"\nFailures saved to {filename}")

    return not failures and not hangs


def main():
    parser = argparse.ArgumentParser(description="Fuzz the HTML to Plain converter with invalid input")
    parser.add_argument(
        "--num-tests", "-n",
        type=int,
        default=1000,
        help="Number of test cases to generate (default: 1000)",
    )
    parser.add_argument(
        "--seed", "-s",
        type=int,
        default=None,
        help="Random seed for reproducibility",
    )
    parser.add_argument(
        "--no-htmx",
        action="store_true",
        help="Disable htmx attribute conversion",
    )
    parser.add_argument(
        "--no-alpine",
        action="store_true",
        help="Disable Alpine.js attribute conversion",
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--save-failures",
        action="store_true",
        help="Save failures to a file",
    )
    parser.add_argument(
        "--sample",
        type=int,
        metavar="N",
        help="Just print N sample fuzzed HTML inputs (no conversion)",
    )

    args = parser.parse_args()

    if args.sample:
        if args.seed:
            random.seed(args.seed)
        for i in range(args.sample):
            print(f"=== Sample {i+1} ===")
            print(generate_fuzzed_html())
            print()
        return

    success = run_fuzzer(
        args.num_tests,
        seed=args.seed,
        verbose=args.verbose,
        save_failures=args.save_failures,
        htmx=not args.no_htmx,
        alpine=not args.no_alpine,
    )

    sys.exit(0 if success else 1)


if __name__ == "__main__":
    main()
