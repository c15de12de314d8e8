"""Site-level collaborators: content, rendering, sitemap and build orchestration."""
