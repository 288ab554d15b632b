"""Board state, drag reordering and notifications (no I/O)."""
