"""
Pipeline stages: the top-level drivers.

  bucket_summary — scenario runs file → JSON + Markdown bucket summary.
  networth_graph — projection file → standalone HTML graph document.

Each stage reads its input completely and validates it before writing.
"""
