"""
utils package
-------------

Contains utility modules used throughout the nurse records app.

Includes the configuration constants loader, logging setup, the backend REST client and the spreadsheet/CSV export helpers.
"""
