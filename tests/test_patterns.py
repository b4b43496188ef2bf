import random

def generate_random_text(length, alphabet="ab", rng=random):
    return ''.join(rng.choice(alphabet) for _ in range(length))

def generate_random_patterns(text, pattern_lengths, rng=random):
    """Substrings of text, so every pattern occurs at least once."""
    patterns = []
    for length in pattern_lengths:
        actual_length = min(length, len(text))  # Ensure length doesn't exceed text length
        start = rng.randint(0, len(text) - actual_length)
        patterns.append(text[start:start + actual_length])
    return patterns
