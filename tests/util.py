import random


def random_split_bytes(data, rng=None):
    """Split data into a list of consecutive chunks of random sizes (0..33 bytes)."""
    rng = rng or random.Random(0x5EED)
    chunks = []
    pos = 0
    while pos < len(data):
        n = rng.randint(0, 33)
        chunks.append(data[pos : pos + n])
        pos += n
    return chunks
