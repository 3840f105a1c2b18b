import math

import numpy as np
import pytest

from focuscheck.bmp import BMPError, BMPImage, read_bmp
from focuscheck.fft import (
    ComplexRGB,
    energy_ratio,
    fft_display_image,
    fft_shift,
    forward_fft_channel,
    image_from_ifft,
    inverse_fft_channel,
    rgb_energy_ratio,
    rgb_fft_shift,
    rgb_forward_fft,
    rgb_ifft_image,
    rgb_inverse_fft,
    save_fft_bmp,
    save_rgb_fft_bmp,
)


def _random_image(height, width, seed=0):
    rng = np.random.default_rng(seed)
    return BMPImage.new(rng.integers(0, 256, (height, width, 3), dtype=np.uint8))


def _constant_image(height, width, value):
    return BMPImage.new(np.full((height, width, 3), value, dtype=np.uint8))


def _impulse_image(height, width):
    pixels = np.zeros((height, width, 3), dtype=np.uint8)
    pixels[0, 0] = 255
    return BMPImage.new(pixels)


@pytest.mark.parametrize("channel", [0, 1, 2])
def test_forward_fft_dc_is_channel_sum(channel):
    image = _random_image(6, 5)
    spectrum = forward_fft_channel(image, channel)
    assert spectrum.shape == (6, 5)
    assert spectrum[0, 0] == pytest.approx(float(image.pixels[:, :, channel].sum()))


def test_forward_fft_other_channel_numbers_select_blue():
    image = _random_image(4, 4)
    np.testing.assert_allclose(
        forward_fft_channel(image, 7), forward_fft_channel(image, 2)
    )


def test_fft_shift_moves_origin_to_centre():
    data = np.arange(35).reshape(5, 7)
    shifted = fft_shift(data)
    assert shifted[5 // 2, 7 // 2] == data[0, 0]
    assert sorted(shifted.ravel()) == sorted(data.ravel())


def test_fft_shift_twice_is_identity_for_even_sizes():
    data = np.arange(24).reshape(4, 6)
    np.testing.assert_array_equal(fft_shift(fft_shift(data)), data)


def test_fft_shift_twice_on_odd_size_is_not_identity():
    data = np.arange(9).reshape(3, 3)
    twice = fft_shift(fft_shift(data))
    assert twice[2, 2] == data[0, 0]


def test_channel_round_trip_restores_pixels():
    image = _random_image(7, 9)
    channels = [inverse_fft_channel(forward_fft_channel(image, c)) for c in range(3)]
    restored = image_from_ifft(*channels)
    np.testing.assert_array_equal(restored.pixels, image.pixels)


def test_rgb_round_trip_with_double_shift_restores_pixels():
    image = _random_image(8, 10, seed=3)
    data = rgb_fft_shift(rgb_fft_shift(rgb_forward_fft(image)))
    restored = rgb_ifft_image(rgb_inverse_fft(data))
    np.testing.assert_array_equal(restored.pixels, image.pixels)
    assert restored.info_header.width == 10
    assert restored.info_header.height == 8


def test_energy_ratio_of_constant_image_is_zero_and_clears_spectrum():
    spectrum = fft_shift(forward_fft_channel(_constant_image(24, 24, 100), 0))
    assert energy_ratio(spectrum) == 0.0
    assert np.all(spectrum == 0)


def test_energy_ratio_of_impulse_is_one():
    spectrum = fft_shift(forward_fft_channel(_impulse_image(24, 24), 0))
    assert energy_ratio(spectrum) == pytest.approx(1.0)


def test_energy_ratio_zeroes_centre_and_keeps_corners():
    spectrum = fft_shift(forward_fft_channel(_random_image(24, 24), 1))
    before = spectrum.copy()
    energy_ratio(spectrum)
    assert spectrum[12, 12] == 0
    assert spectrum[0, 0] == before[0, 0]


def test_energy_ratio_without_low_region_is_nan():
    spectrum = fft_shift(forward_fft_channel(_random_image(4, 4), 0))
    before = spectrum.copy()
    result = energy_ratio(spectrum)
    assert math.isnan(result)
    np.testing.assert_array_equal(spectrum, before)


def test_energy_ratio_rejects_one_dimensional_input():
    with pytest.raises(ValueError):
        energy_ratio(np.zeros(5, dtype=complex))


def test_rgb_energy_ratio_of_impulse_is_norm_of_ones():
    data = rgb_fft_shift(rgb_forward_fft(_impulse_image(24, 24)))
    assert rgb_energy_ratio(data) == pytest.approx(math.sqrt(3))


def test_display_image_of_constant_image_lights_only_dc():
    data = rgb_forward_fft(_constant_image(6, 8, 50))
    display = fft_display_image(data.red, data.green, data.blue)
    assert display.width == 8 and display.height == 6
    assert display.pixels[0, 0].tolist() == [255, 255, 255]
    rest = display.pixels.copy()
    rest[0, 0] = 0
    assert not rest.any()


def test_display_image_of_zero_spectrum_is_black():
    zero = np.zeros((3, 4), dtype=complex)
    display = fft_display_image(zero, zero, zero)
    assert not display.pixels.any()


def test_image_from_ifft_rounds_and_clamps():
    values = np.array([[-5.0, 300.0, 2.5]], dtype=complex)
    image = image_from_ifft(values, values, values)
    assert image.pixels[0, :, 0].tolist() == [0, 255, 3]


def test_save_rgb_fft_bmp_round_trips(tmp_path):
    data = ComplexRGB(*rgb_forward_fft(_random_image(5, 6)).__dict__.values())
    path = tmp_path / "fft.bmp"
    save_rgb_fft_bmp(data, path)
    expected = fft_display_image(data.red, data.green, data.blue)
    np.testing.assert_array_equal(read_bmp(path).pixels, expected.pixels)


def test_save_fft_bmp_into_missing_directory_fails(tmp_path):
    zero = np.zeros((2, 2), dtype=complex)
    with pytest.raises(BMPError):
        save_fft_bmp(tmp_path / "missing" / "out.bmp", zero, zero, zero)