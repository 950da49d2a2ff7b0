# -*- coding: utf-8 -*-
"""Display and reminder preferences kept in the shared namespace."""
