"""Host-side collaborators layered outside the editing core."""
