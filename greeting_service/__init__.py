"""Greeting service runtime package."""
