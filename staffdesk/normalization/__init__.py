"""Normalization package.

One normalizer per staff record field that needs a canonical stored form:
NIC numbers, contact phone numbers, email addresses and dates.

The string normalizers follow the same contract::

    def normalize_<field>(raw: str) -> str | None:
        ...

except :func:`staffdesk.normalization.nic_codec.normalize_nic`, which raises
``NICError`` with a specific kind instead of returning ``None``.
"""
