"""Launch the lazy-selection browser over a synthetic 20k-record catalogue."""

import lazy_selection as ls

source = ls.FrameCollectionSource.synthetic(20_000, page_size=12, delay=0.3)

print(f"Synthetic catalogue: {source.total} records")
print("Launching browser...")

ls.browse(source=source)
