"""Economy simulator bank selection backend."""
