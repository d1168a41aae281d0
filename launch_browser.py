"""Launch the lazy-selection browser against the Art Institute of Chicago API."""

import lazy_selection as ls

settings = ls.Settings.from_env()

print(f"API: {settings.api_base_url} ({settings.page_size} records per page)")
print("Launching browser...")

ls.browse(settings=settings)
