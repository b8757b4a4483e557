"""Temporal clustering of dated images.

Records are bucketed per calendar month, neighbouring buckets are merged in a
single greedy pass, and the surviving groups get their final label and center
date.
"""
