"""Interaction layers - sensing and acting on page elements."""
