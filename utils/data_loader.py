import gzip

def load_text(path, size_limit=None, encoding='latin-1'):
    """
    Reads a gzip compressed corpus. With encoding=None the raw bytes are
    returned, which feed the suffix array builder as byte symbols.
    """
    mode = 'rb' if encoding is None else 'rt'
    with gzip.open(path, mode, encoding=encoding) as f:
        if size_limit:
            return f.read(size_limit)  # Read up to `size_limit` symbols
        return f.read()
