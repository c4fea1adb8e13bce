"""Onboarding wizard screens.

Screens are imported lazily by the app to avoid circular imports.
Use:
    from psychsync.tui.screens.welcome import WelcomeScreen
    from psychsync.tui.screens.goals import GoalsScreen
    from psychsync.tui.screens.baseline import BaselineScreen
"""
