"""
merkletx CLI

Command-line driver for merkletx: random demo trees, proofs, rendering,
hashing and benchmarks.

Usage:
    python -m merkletx_cli demo --algorithm SHA-256 --levels 4
    python -m merkletx_cli prove a b c --target b
    python -m merkletx_cli tree a b c
    python -m merkletx_cli hash hello --algorithm MurmurHash2
"""
