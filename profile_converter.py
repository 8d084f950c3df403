#!/usr/bin/env python3
"""Profile the HTML to Plain converter to find performance bottlenecks."""

import cProfile
import io
import pstats

from plainkit_converter import Converter

# Sample page, one repetition of which stays a valid fragment
section = """
<div class="container" x-data="{ open: false }">
    <form hx-post="/api/save" hx-target="#result" hx-swap="outerHTML">
        <label for="name">Name</label>
        <input type="text" name="name" value="" placeholder="Your name" required>
        <button type="submit" @click.prevent="open = !open" :disabled="busy">Save</button>
    </form>
    <table>
        <tr><td>Cell 1</td><td data-id="2">Cell 2</td></tr>
        <tr><td>Cell 3</td><td aria-label="four">Cell 4</td></tr>
    </table>
    <ul x-show="open"><li>One</li><li>Two</li></ul>
</div>
"""

html = (
    "<!DOCTYPE html>\n<html>\n<head><title>Test</title></head>\n<body>"
    + section * 100  # Repeat for more meaningful results
    + "</body>\n</html>\n"
)

converter = Converter(htmx=True, alpine=True)

# Profile
pr = cProfile.Profile()
pr.enable()

for _ in range(10):
    result = converter.convert(html)

pr.disable()

# Print stats
s = io.StringIO()
ps = pstats.Stats(pr, stream=s).sort_stats("cumulative")
ps.print_stats(50)  # Top 50 functions
print(s.getvalue())
