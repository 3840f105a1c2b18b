"""Command line: judge whether the BMP images in a directory are in focus."""

from __future__ import annotations

import argparse
import os
import sys

from .bmp import BMPError, PathType, read_bmp, save_bmp
from .fft import (
    rgb_energy_ratio,
    rgb_fft_shift,
    rgb_forward_fft,
    rgb_ifft_image,
    rgb_inverse_fft,
    save_rgb_fft_bmp,
)
from .scan import scan_bmp_files

FOCUS_THRESHOLD = 1.2


def process_fft(input_path: PathType, display_path: PathType, ifft_path: PathType) -> int:
    """Save the spectrum display and the high-pass filtered image of a BMP.

    Returns 0 on success and 1 when the input cannot be read.
    """
    try:
        image = read_bmp(input_path)
    except BMPError as exc:
        print(exc)
        print("Failed to read BMP image.")
        return 1
    print(f"Image read: width={image.width}, height={image.height}")

    shifted = rgb_fft_shift(rgb_forward_fft(image))
    ratio = rgb_energy_ratio(shifted)

    try:
        save_rgb_fft_bmp(shifted, display_path)
    except BMPError:
        print("Error saving FFT display image.")
    else:
        print(f"FFT display image saved to {display_path}")
    print(f"Energy ratio {ratio:f}")

    restored = rgb_inverse_fft(rgb_fft_shift(shifted))
    try:
        save_bmp(ifft_path, rgb_ifft_image(restored))
    except BMPError:
        print("Error saving inverse FFT image.")
    else:
        print(f"Inverse FFT image saved to {ifft_path}")
    return 0


def check_focus(path: PathType) -> bool:
    """Return True when the image at ``path`` looks sharp."""
    image = read_bmp(path)
    ratio = rgb_energy_ratio(rgb_fft_shift(rgb_forward_fft(image)))
    return not ratio < FOCUS_THRESHOLD


def main(argv=None) -> int:
    """Report every BMP file in a directory as sharp or blurry."""
    parser = argparse.ArgumentParser(
        prog="focuscheck",
        description="Report whether BMP images in a directory are sharp or blurry.",
    )
    parser.add_argument(
        "directory", nargs="?", help="directory to scan (prompted for if omitted)"
    )
    args = parser.parse_args(argv)

    directory = args.directory
    if directory is None:
        try:
            directory = input("Enter directory path: ")
        except EOFError:
            print("Error reading input.", file=sys.stderr)
            return 1

    try:
        names = scan_bmp_files(directory)
    except OSError as exc:
        print(f"opendir: {exc}", file=sys.stderr)
        return 1
    print(f"Found {len(names)} .bmp file(s):")

    status = 0
    for name in names:
        try:
            sharp = check_focus(os.path.join(directory, name))
        except BMPError as exc:
            print(f"{name}: {exc}", file=sys.stderr)
            status = 1
            continue
        print(f"{name} is {'sharp' if sharp else 'blurry'}")
    return status


if __name__ == "__main__":
    raise SystemExit(main())