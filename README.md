# cryptoquip

Fetches the list of recent Cryptoquip puzzles, lets you choose one, and
prepares it for printing. The puzzle image is pulled out of the published PDF,
the date in the header is blanked out, the header, puzzle and clue are cropped
and stacked, and two copies go onto a page scaled to US letter size (a Sunday
puzzle is scaled to the printable page width, other days to a height of three
inches). The result is saved as a greyscale PNG named
`cryptoquip_<timestamp>.png` in your temporary directory and opened in the
system image viewer.

## Installation

```
pip install .
```

## Usage

```
cryptoquip
```

You will see a two-column menu of the available puzzles, newest first:

```
Which Crytoquip to download?
 - press Enter to download the most recent
 - press q to Quit

  0 - Monday   - 06/02/25 | 1 - Sunday - 06/01/25
  2 - Saturday - 05/31/25 | 3 - Friday - 05/30/25
> 
```

- Type a number and press Enter to pick that puzzle.
- Press Enter alone to pick the most recent one (`0`).
- Type `q` (or `Q`) to quit.

If you type something that is not a number, or a number outside the menu, the
prompt says so and asks again.

The image is opened with `xdg-open` on Linux and other Unix systems, and with
`cmd /C start` on Windows.

If anything goes wrong (the site cannot be reached, the page or PDF does not
have the expected layout), the command prints `error: <reason>` to standard
error and exits with status 1.

### Keeping a local copy of the PDF

```
cryptoquip --cache [PATH]
```

`PATH` defaults to `./out/cache.pdf`; its directory must already exist.

- If the file does not exist yet, the menu is shown as usual and the
  downloaded PDF is also written to `PATH`.
- If the file exists, no menu is shown and nothing is downloaded: the image is
  taken from the cached PDF, treated as dated today (so today's weekday decides
  whether the Sunday layout is used), and the finished page is additionally
  saved as `test.png` next to the cache file before it is opened.

## Using it from Python

The steps are available on their own:

- `cryptoquip.request.get_home_page()` and `cryptoquip.context.get_image_contexts(page)`
  give the list of `ImageContext` entries (ordinal, link and date).
- `cryptoquip.pdf.download_pdf_binary(context)` downloads a puzzle's PDF and
  returns its image as a `RawImage`; `cryptoquip.pdf.extract_image(data)` does
  the same for PDF bytes you already have.
- `cryptoquip.edit.edit_image(image, context)` returns the finished letter page.
- `cryptoquip.display.write_png(image, path)` saves a `RawImage` as PNG, and
  `cryptoquip.display.display(image)` saves it to the temporary directory and
  opens it.

Failures are raised as exceptions: `RequestError`, `ContextParseError`,
`PdfError`, `ImageParseError`, `EditError`, `MenuError` and `DisplayError`.

## Limitations

- The PDF reader is not a general PDF parser. It scans the file for the first
  image object and understands only image streams stored as plain objects,
  uncompressed or with `FlateDecode` or `DCTDecode`; RGB images are converted
  to greyscale. PDFs that keep their objects in compressed object streams or use
  other image filters are not supported.
- The page layout is found by looking for bands of non-white pixels; it relies
  on the puzzle having the usual header, puzzle rows, indented answer row and
  clue, and fails with an error otherwise.
- Nothing is sent to a printer; the page is only saved and opened in a viewer.

## Running the tests

```
pip install ".[test]"
pytest
```