"""Feature packages: playlist format, legacy adapter and batch conversion."""
