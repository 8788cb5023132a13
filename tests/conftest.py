"""
Global pytest configuration and fixtures.
"""

import copy
import json

import pytest

from darksky.config.settings import Settings


SAMPLE_FORECAST = {
    "latitude": 37.8267,
    "longitude": -122.4233,
    "timezone": "America/Los_Angeles",
    "offset": -8,
    "currently": {
        "time": 1509993277,
        "summary": "Drizzle",
        "icon": "rain",
        "nearestStormDistance": 0,
        "precipIntensity": 0.0089,
        "precipIntensityError": 0.0046,
        "precipProbability": 0.9,
        "precipType": "rain",
        "temperature": 66.1,
        "apparentTemperature": 66.31,
        "dewPoint": 60.77,
        "humidity": 0.83,
        "pressure": 1010.34,
        "windSpeed": 5.59,
        "windGust": 12.03,
        "windBearing": 246,
        "cloudCover": 0.7,
        "uvIndex": 1,
        "visibility": 9.84,
        "ozone": 267.44,
    },
    "minutely": {
        "summary": "Light rain stopping in 13 min., starting again 30 min. later.",
        "icon": "rain",
        "data": [
            {
                "time": 1509993240,
                "precipIntensity": 0.007,
                "precipIntensityError": 0.004,
                "precipProbability": 0.84,
                "precipType": "rain",
            },
            {"time": 1509993300, "precipIntensity": 0, "precipProbability": 0},
        ],
    },
    "hourly": {
        "summary": "Rain starting later this afternoon, continuing until this evening.",
        "icon": "rain",
        "data": [
            {
                "time": 1509991200,
                "summary": "Mostly Cloudy",
                "icon": "partly-cloudy-day",
                "precipIntensity": 0.0007,
                "precipProbability": 0.1,
                "precipType": "rain",
                "temperature": 65.76,
                "apparentTemperature": 66.01,
                "humidity": 0.82,
                "windSpeed": 4.77,
                "windGust": 9.54,
                "windBearing": 235,
                "uvIndex": 1,
            },
            {
                "time": 1509994800,
                "summary": "Rain",
                "icon": "rain",
                "precipIntensity": 0.0139,
                "precipProbability": 0.77,
                "precipType": "rain",
                "temperature": 66.79,
                "humidity": 0.83,
                "windSpeed": 5.51,
                "uvIndex": 1,
            },
        ],
    },
    "daily": {
        "summary": "Mixed precipitation throughout the week, with temperatures falling to 39°F on Saturday.",
        "icon": "rain",
        "data": [
            {
                "time": 1509944400,
                "summary": "Rain starting in the afternoon, continuing until evening.",
                "icon": "rain",
                "sunriseTime": 1509978800,
                "sunsetTime": 1510016087,
                "moonPhase": 0.59,
                "precipIntensity": 0.0088,
                "precipIntensityMax": 0.0725,
                "precipIntensityMaxTime": 1510002000,
                "precipProbability": 0.73,
                "precipType": "rain",
                "temperatureHigh": 66.35,
                "temperatureHighTime": 1509994800,
                "temperatureLow": 41.28,
                "temperatureLowTime": 1510056000,
                "apparentTemperatureHigh": 66.53,
                "temperatureMin": 52.08,
                "temperatureMinTime": 1510027200,
                "temperatureMax": 66.35,
                "temperatureMaxTime": 1509994800,
                "apparentTemperatureMin": 52.08,
                "apparentTemperatureMinTime": 1510027200,
                "apparentTemperatureMax": 66.53,
                "apparentTemperatureMaxTime": 1509994800,
                "uvIndex": 2,
                "uvIndexTime": 1509987600,
            },
        ],
    },
    "alerts": [
        {
            "title": "Flood Watch for Mason, WA",
            "time": 1509993360,
            "expires": 1510036680,
            "description": "...FLOOD WATCH REMAINS IN EFFECT THROUGH LATE MONDAY NIGHT...",
            "uri": "https://alerts.weather.gov/cap/wwacapget.php?x=WA1255E4DB8494.FloodWatch.1255E4DCE35CWA.SEWFFASEW.38e78ec64613478bb70fc6ed9c87f6e6",
            "regions": ["Mason"],
            "severity": "watch",
        }
    ],
    "flags": {
        "sources": ["isd", "nearest-precip", "nwspa", "cmc", "gfs", "hrrr", "madis", "nam", "sref", "darksky"],
        "isd-stations": ["724943-99999", "745039-99999"],
        "units": "us",
    },
}


@pytest.fixture
def forecast_payload():
    """A complete forecast payload as returned by the API."""
    return copy.deepcopy(SAMPLE_FORECAST)


@pytest.fixture
def forecast_body(forecast_payload):
    """The sample payload encoded as a JSON response body."""
    return json.dumps(forecast_payload).encode("utf-8")


@pytest.fixture
def minimal_payload():
    """The smallest payload the schema accepts."""
    return {"latitude": 19.2465, "longitude": -99.1013, "timezone": "America/Mexico_City"}


@pytest.fixture
def settings():
    """Settings isolated from the environment and any .env file."""
    return Settings(
        darksky_api_key="test-key",
        darksky_api_base_url="https://api.darksky.net",
        request_timeout=10,
        _env_file=None,
    )
