VMBOOT_VERSION = "0.3.2"
VMBOOT_TIMESTAMP = "2026-10-19"
