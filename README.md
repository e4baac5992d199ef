# pdfkiln

Pure-Python building blocks for producing PDF files. No runtime dependencies.

## What is in it

- `pdfkiln.util`: geometry values (`Posn`, `Line`, `Dims`, `Rectangle`, `Matrix`), `format_number`
  (writes a number with no exponent and no trailing zeros), the PDF `Name` and `Reference` values,
  and the enums `WindingRule`, `CompressionMethod` and `StrokeOrFill`.
- `pdfkiln.version`: the ordered PDF `Version` enum (`Version.default()` is 1.5) and `TargetVersion`.
- `pdfkiln.page_size`: `PageSize`, covering A0–A5, Letter and Legal, and custom sizes given in
  points, inches or millimetres (`custom_points`, `custom_inches`, `custom_mm`; negative sizes clamp
  to zero). `dims_points()` gives the size in points and `rect_to_pdf_array()` a MediaBox array.
- `pdfkiln.text`: the twelve Helvetica, Times and Courier variants of `StandardFont`, approximate
  text measurement (`measure_text`), font choice from a family name, weight and style
  (`from_family`), and `wrap_text`, which wraps text by word or by character, or not at all.
- `pdfkiln.resource_category`: `ResourceCategory`, the keys of a resource dictionary and the
  prefixes used for generated names.
- `pdfkiln.resources`: `NamedResources`, which hands out resource names such as `F0`, `GS0` and `P1`.
- `pdfkiln.xref`: `XRefTable` and `XRefEntry` for writing the classic cross-reference table;
  `XRefError` is raised when the table is empty or its first entry is not the free root entry.
- `pdfkiln.tree`: name and number tree nodes (`Tree`).
- `pdfkiln.soft_mask`, `pdfkiln.pattern`, `pdfkiln.shading`: soft masks, tiling patterns and
  shading dictionaries of types 1 to 7.

Dictionaries built by `Tree`, `SoftMask`, `TilingPattern` and the shading classes are plain Python
dicts held in their `dictionary` attribute. Adding a key that is already present raises `KeyError`.

## Examples

Page sizes:

```python
from pdfkiln.page_size import PageSize

PageSize.LETTER.dims_points()          # Dims(width=612.0, height=792.0)
PageSize.custom_mm(100, 50).rect_to_pdf_array()
```

Wrapping text:

```python
from pdfkiln.text import StandardFont, WrapMode, wrap_text

lines = wrap_text("This is a long line of text", 50.0,
                  StandardFont.HELVETICA, 12.0, WrapMode.WORD_WRAP)
```

Naming resources:

```python
from pdfkiln.resources import NamedResources
from pdfkiln.resource_category import ResourceCategory

res = NamedResources()
res.add(ResourceCategory.FONT, 1)      # "F0"
res.add(ResourceCategory.PATTERN, 8)   # "P0"
```

Writing a cross-reference table:

```python
import io
from pdfkiln.xref import XRefTable, XRefEntry, ObjectStatus, Generation

table = XRefTable()
table.add_entry(XRefEntry(1, 18, ObjectStatus.IN_USE, Generation.NORMAL))
buf = io.BytesIO()
table.serialize(buf)
```

## What it does not do

pdfkiln does not write a whole PDF file on its own. It has no document or page-tree object, no
encoder that turns its dictionaries into PDF syntax, no content-stream drawing operators, no
compression, encryption or images, and no command-line tool. It gives the parts listed above for
code that assembles the file.

## Running the tests

```
pip install -e .[test]
pytest
```