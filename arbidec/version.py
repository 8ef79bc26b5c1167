"""0.0.1.2026.1017.2215.07"""
