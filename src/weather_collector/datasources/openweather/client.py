"""OpenWeatherMap API client constants.

API docs:
  - Current weather: https://openweathermap.org/current
"""

OPENWEATHER_API = "https://api.openweathermap.org/data/2.5/weather"

# Celsius, hPa, m/s
UNITS = "metric"
