"""Public surface for incflat.core: data models, errors and protocol types."""
