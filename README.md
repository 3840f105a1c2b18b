# focuscheck

focuscheck tells whether BMP photographs are in focus. It takes the 2-D
Fourier transform of each colour channel, centres the spectrum, and compares
the average log-magnitude of the high spatial frequencies with that of the
low frequencies. The three per-channel ratios are combined as a Euclidean
norm. An image whose combined ratio is 1.2 or more is reported as sharp;
below that it is reported as blurry.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
focuscheck [DIRECTORY]
```

If no directory is given on the command line, the command asks for one.
It lists every entry in that directory whose name ends in `.bmp` (the
extension match ignores case), in sorted order, and prints one line per
file:

```
$ focuscheck photos
Found 2 .bmp file(s):
beach.bmp is sharp
night.bmp is blurry
```

File names are joined to the directory with the platform's path separator.
If the directory cannot be opened, an error is printed to standard error
and the exit status is 1. A file that cannot be read as a BMP is reported
on standard error, the remaining files are still checked, and the exit
status is 1.

## Library use

```python
from focuscheck.bmp import read_bmp, save_bmp
from focuscheck.fft import rgb_forward_fft, rgb_fft_shift, rgb_energy_ratio
from focuscheck.cli import check_focus, process_fft

image = read_bmp("photo.bmp")          # BMPImage; image.pixels is (h, w, 3) uint8 RGB
spectrum = rgb_fft_shift(rgb_forward_fft(image))
print(rgb_energy_ratio(spectrum))

print(check_focus("photo.bmp"))        # True when sharp

# Writes a log-magnitude picture of the high-pass spectrum and the
# high-pass filtered image rebuilt by the inverse transform.
# Returns 0, or 1 when the input cannot be read.
process_fft("photo.bmp", "spectrum.bmp", "highpass.bmp")
```

Modules:

- `focuscheck.bmp` — `read_bmp` and `save_bmp` for uncompressed 24-bit
  bitmaps, in bottom-up or top-down row order. `BMPImage.new(pixels)`
  builds an image with fresh headers. Failures raise `BMPError`.
- `focuscheck.scan` — `scan_bmp_files(path)` returns the sorted names of
  the `.bmp` files in a directory and raises `OSError` if it cannot be
  opened.
- `focuscheck.fft` — per-channel and RGB (`ComplexRGB`) forward and inverse
  transforms, `fft_shift`, `energy_ratio`, and helpers that turn spectra or
  inverse transforms back into images (`fft_display_image`,
  `image_from_ifft`, `save_fft_bmp`, `save_rgb_fft_bmp`, `rgb_ifft_image`).
- `focuscheck.cli` — `main`, `check_focus` and `process_fft`.

`energy_ratio` and `rgb_energy_ratio` set the low-frequency coefficients of
the spectrum they are given to zero, in place.

## Limitations

- Only the `BM` signature of a file is checked. Bit depth and compression
  are not; anything other than an uncompressed 24-bit BMP is misread.
- Other image formats are not supported.
- `process_fft` has no command of its own; call it from Python.
- On very small images (under 12 pixels wide or high) the low-frequency
  region can be empty, and the ratio becomes infinite or NaN.