from collections import Counter
import time

def time_function(func):
    """
    Decorator to measure the execution time of a function
    """
    def wrapper(*args, **kwargs):
        start_time = time.perf_counter()
        result = func(*args, **kwargs)
        end_time = time.perf_counter()
        execution_time = end_time - start_time
        return result, execution_time
    return wrapper

def build_count(text):
    """Maps each symbol to the number of symbols in text smaller than it."""
    alphabet = sorted(set(text))
    c = Counter(text)
    total = 0
    count = {}
    for symbol in alphabet:
        count[symbol] = total
        total += c[symbol]
    return count
