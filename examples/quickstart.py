"""Quickstart example for mdlinkref.

This example demonstrates feeding a paragraph to the link reference
definition parser, one line at a time and through the convenience driver.
"""

import logging

from mdlinkref import (
    LinkReferenceDefinitionParser,
    collect_references,
    parse_definitions,
)

logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

# Example 1: Line-by-line feeding
print("=" * 50)
print("Example 1: Line-by-Line Feeding")
print("=" * 50)

parser = LinkReferenceDefinitionParser()
for line in [
    '[Home]: https://example.com "Home page"',
    "[docs]:",
    "  <https://example.com/my docs>",
    "  'Documentation",
    "  index'",
    "Read the [docs] or go [Home].",
]:
    parser.feed(line)
    print(f"{parser.state:<16} <- {line!r}")

for definition in parser.harvest_definitions():
    print(definition)
print(parser.remaining_paragraph_lines())
# Output: ['Read the [docs] or go [Home].']

# Example 2: Malformed definitions stay as text
print("\n" + "=" * 50)
print("Example 2: Malformed Definitions")
print("=" * 50)

result = parse_definitions('[ok]: /ok\n[bad]: /url "title" trailing\n[late]: /late')
print(result.definitions)
# Output: (LinkReferenceDefinition(label='ok', destination='/ok', title=None),)
print(result.paragraph_text)
# Output: [bad]: /url "title" trailing
#         [late]: /late

# Example 3: Reference map across paragraphs
print("\n" + "=" * 50)
print("Example 3: Reference Map")
print("=" * 50)

refs = collect_references(["[Foo]: /first", "[FOO]: /second\n[bar]: /bar"])
print(refs.get("foo"))
# Output: LinkReferenceDefinition(label='foo', destination='/first', title=None)
print(len(refs))
# Output: 2

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
