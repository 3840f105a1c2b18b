"""Two-dimensional Fourier analysis of RGB images and a focus measure."""

from __future__ import annotations

import math
from dataclasses import dataclass

import numpy as np

from .bmp import BMPImage, PathType, save_bmp

SQUARE_THRESHOLD = 6
LINE_THRESHOLD = 100

RED, GREEN, BLUE = 0, 1, 2


@dataclass
class ComplexRGB:
    """One complex ``(height, width)`` array for each colour channel."""

    red: np.ndarray
    green: np.ndarray
    blue: np.ndarray


def _low_frequency_mask(height: int, width: int) -> np.ndarray:
    """Mark the coefficients of a centred spectrum counted as low frequency."""
    ax = np.abs(np.arange(width) - width // 2)[np.newaxis, :]
    ay = np.abs(np.arange(height) - height // 2)[:, np.newaxis]
    square = (ax < width // (2 * SQUARE_THRESHOLD)) & (
        ay < height // (2 * SQUARE_THRESHOLD)
    )
    lines = (ax < width // LINE_THRESHOLD) | (ay < height // LINE_THRESHOLD)
    return square | lines


def energy_ratio(spectrum: np.ndarray) -> float:
    """Return the mean log magnitude of high over low frequencies.

    ``spectrum`` is a centred (shifted) two-dimensional spectrum. Its
    low-frequency coefficients are set to zero in place, which leaves a
    high-pass filtered spectrum behind. When either region is empty the
    result follows IEEE arithmetic and may be ``nan`` or infinite.
    """
    if spectrum.ndim != 2:
        raise ValueError(f"spectrum must be two-dimensional, got {spectrum.shape}")
    height, width = spectrum.shape
    low = _low_frequency_mask(height, width)
    magnitude = np.log1p(np.abs(spectrum))
    mag_low = np.float64(magnitude[low].sum())
    mag_high = np.float64(magnitude[~low].sum())
    n_low = int(low.sum())
    n_high = int(low.size - n_low)
    spectrum[low] = 0
    with np.errstate(divide="ignore", invalid="ignore"):
        return float((mag_high / n_high) / (mag_low / n_low))


def fft_shift(spectrum: np.ndarray) -> np.ndarray:
    """Move the zero-frequency term to the centre, as a new array."""
    height, width = spectrum.shape
    return np.roll(spectrum, (height // 2, width // 2), axis=(0, 1))


def forward_fft_channel(image: BMPImage, channel: int) -> np.ndarray:
    """Return the 2-D Fourier transform of one colour channel.

    Channel 0 is red, 1 is green and any other number selects blue.
    """
    index = channel if channel in (RED, GREEN) else BLUE
    return np.fft.fft2(image.pixels[:, :, index].astype(np.float64))


def inverse_fft_channel(spectrum: np.ndarray) -> np.ndarray:
    """Return the normalised inverse 2-D Fourier transform."""
    return np.fft.ifft2(spectrum)


def fft_display_image(
    red: np.ndarray, green: np.ndarray, blue: np.ndarray
) -> BMPImage:
    """Render log magnitudes of three spectra as an RGB image.

    Each channel is scaled so that its largest magnitude becomes 255.
    """
    channels = []
    for spectrum in (red, green, blue):
        magnitude = np.log1p(np.abs(spectrum))
        peak = float(magnitude.max(initial=0.0))
        if peak > 0:
            scaled = magnitude / peak * 255.0
        else:
            scaled = np.zeros_like(magnitude)
        channels.append(scaled.astype(np.uint8))
    return BMPImage.new(np.stack(channels, axis=-1))


def _to_byte(values: np.ndarray) -> np.ndarray:
    real = np.real(values)
    rounded = np.trunc(real + np.copysign(0.5, real))
    return np.clip(rounded, 0, 255).astype(np.uint8)


def image_from_ifft(red: np.ndarray, green: np.ndarray, blue: np.ndarray) -> BMPImage:
    """Build an image from the real parts of three inverse transforms.

    Values are rounded half away from zero and clamped to 0..255.
    """
    return BMPImage.new(np.stack([_to_byte(c) for c in (red, green, blue)], axis=-1))


def save_fft_bmp(
    path: PathType, red: np.ndarray, green: np.ndarray, blue: np.ndarray
) -> None:
    """Write the magnitude display of three spectra as a BMP file."""
    save_bmp(path, fft_display_image(red, green, blue))


def rgb_forward_fft(image: BMPImage) -> ComplexRGB:
    """Transform every colour channel of ``image``."""
    return ComplexRGB(
        forward_fft_channel(image, RED),
        forward_fft_channel(image, GREEN),
        forward_fft_channel(image, BLUE),
    )


def rgb_fft_shift(data: ComplexRGB) -> ComplexRGB:
    """Shift every channel of ``data``."""
    return ComplexRGB(fft_shift(data.red), fft_shift(data.green), fft_shift(data.blue))


def rgb_inverse_fft(data: ComplexRGB) -> ComplexRGB:
    """Inverse-transform every channel of ``data``."""
    return ComplexRGB(
        inverse_fft_channel(data.red),
        inverse_fft_channel(data.green),
        inverse_fft_channel(data.blue),
    )


def save_rgb_fft_bmp(data: ComplexRGB, path: PathType) -> None:
    """Write the magnitude display of ``data`` as a BMP file."""
    save_fft_bmp(path, data.red, data.green, data.blue)


def rgb_ifft_image(data: ComplexRGB) -> BMPImage:
    """Build an image from inverse-transformed channels."""
    return image_from_ifft(data.red, data.green, data.blue)


def rgb_energy_ratio(data: ComplexRGB) -> float:
    """Return the Euclidean norm of the three channels' energy ratios.

    Like :func:`energy_ratio`, this zeroes the low frequencies in place.
    """
    return math.hypot(
        energy_ratio(data.red), energy_ratio(data.green), energy_ratio(data.blue)
    )