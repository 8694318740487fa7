"""Routing — path-segment trie and the locale-aware route table.

Route files are scanned once, each registered under its base template
and one template per configured locale, and looked up in
O(path-depth) per request.
"""
