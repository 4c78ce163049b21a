"""Domain contracts shared by services and storage backends."""
