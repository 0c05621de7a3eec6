"""Binary search, red-black trees, Huffman coding, A* path finding, FFT, MFCC and DTW."""

__version__ = "0.1.0"