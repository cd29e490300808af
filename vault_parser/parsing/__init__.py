"""
This module holds the field-level decoders used to turn raw vault entries
into records: codec helpers, cipher mode detection, IV/ciphertext splitting,
timestamp and URL normalization, and the XML reader itself.
"""
