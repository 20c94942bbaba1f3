"""Wire format decoders."""
