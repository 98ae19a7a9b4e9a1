"""Installed-app search worker: fuzzy word-prefix matching, ranking and result assembly."""
