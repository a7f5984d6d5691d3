"""Weather-driven activity suitability ranking.

Scores skiing, surfing, outdoor and indoor sightseeing for each day of a
daily weather forecast and ranks the activities over the whole period.
"""

__version__ = "1.0.0"
