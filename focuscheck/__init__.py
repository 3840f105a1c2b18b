"""Judge the focus of BMP images from the energy distribution of their Fourier spectrum."""

__version__ = "0.1.0"
__all__ = ["bmp", "scan", "fft", "cli"]