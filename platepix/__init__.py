# -*- coding: utf-8 -*-
"""PlatePix / MyPlates daily motivation backend.

Serves "today's" motivation (and reminder) to the app and its widget, sharing
the daily choice through an app-group key-value namespace.
"""

__version__ = "1.0.0"
