"""PsychSync onboarding."""
