# 🧩 pricing_engine/shared/__init__.py
"""
🧩 Спільний шар: логування, незмінні структури, винятки та метрики.
"""
