"""Banner definitions bundled with ascii_banner (format version 1)."""
