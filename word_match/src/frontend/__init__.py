"""Flask front end for the word match engine (see web.py)."""
