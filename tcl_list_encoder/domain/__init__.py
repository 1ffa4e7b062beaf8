"""Core list encoding: value model, element quoting, list composition."""
