"""HTTP surface for the UI collaborator."""
