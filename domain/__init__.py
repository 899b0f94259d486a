"""Describes the past life domain. Centres around `resolve`.

Why is this (barely) hard?

- A name has to land on the same title and year forever, on every machine.
  Bookmarked screenshots depend on it. So the hash is pinned to 32-bit
  wrapping arithmetic over UTF-16 code units.
- The story is decoration. It comes from a large language model behind an
  api and is allowed to fail. When it does we still know the title and year,
  so there is always something to show.
- The title catalog is data, not code. It is loaded once and never changes.
"""
