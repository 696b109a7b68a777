"""
Helpers for working with dicts, sequences and streams.

These are small, abstract idioms for data structure processing: extracting keys and values, merging dicts without
overwriting, splitting sequences into sections or pages, filtering out nulls, and sorting by multiple dynamically
added criteria (see `nsw.ext.collection_utils.sorter`).

Unless documented otherwise, the helpers accept None in place of a collection and treat it as empty.
"""


__version__ = '1.0.0'
