"""RecordCanon — canonical keys for business records.

Turns free-text company names, websites, phone numbers, addresses and
postal codes into stable strings suitable for deduplication and record
linkage.
"""
