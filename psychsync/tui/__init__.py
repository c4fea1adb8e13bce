"""Textual front end for the onboarding flow."""
