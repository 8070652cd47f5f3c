"""Report su Google Drive e grafici delle spese."""
