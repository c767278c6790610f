"""Demo host program built on tinycli (``tinycli-demo``)."""
