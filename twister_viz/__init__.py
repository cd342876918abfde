"""Visual checks of generator output."""
