"""
Data models for Dark Sky forecast responses.

This module defines Pydantic models mirroring the JSON payload returned by
the forecast endpoint: the top-level Forecast, its Datablocks and
Datapoints, severe weather Alerts and the Flags metadata block.

Nearly every field is optional. Different regions, data sources and
request options omit different fields, and a payload missing any of them
must still deserialize. Unknown fields are ignored.
"""

from datetime import datetime, timezone
from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, StrictFloat
from pydantic.alias_generators import to_camel

from darksky.data.options import Block


def _to_kebab(name: str) -> str:
    return name.replace("_", "-")


def _utc(timestamp: Optional[int]) -> Optional[datetime]:
    if timestamp is None:
        return None
    return datetime.fromtimestamp(timestamp, tz=timezone.utc)


class Icon(str, Enum):
    """Machine-readable weather summary, suitable for picking an icon."""

    CLEAR_DAY = "clear-day"
    CLEAR_NIGHT = "clear-night"
    CLOUDY = "cloudy"
    FOG = "fog"
    HAIL = "hail"
    PARTLY_CLOUDY_DAY = "partly-cloudy-day"
    PARTLY_CLOUDY_NIGHT = "partly-cloudy-night"
    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"
    THUNDERSTORM = "thunderstorm"
    TORNADO = "tornado"
    WIND = "wind"


class PrecipitationType(str, Enum):
    """Type of precipitation occurring within a datapoint."""

    RAIN = "rain"
    SLEET = "sleet"
    SNOW = "snow"


class Severity(str, Enum):
    """Severity of a weather alert."""

    ADVISORY = "advisory"
    WATCH = "watch"
    WARNING = "warning"


class Alert(BaseModel):
    """
    Severe weather warning issued for a location.

    Attributes:
        expires: Unix time at which the alert expires
        description: Detailed description of the alert
        title: Short text summary
        uri: Link to detailed information about the alert
        regions: Names of the regions covered by the alert
        time: Unix time at which the alert was issued
        severity: Severity of the alert
    """

    model_config = ConfigDict(extra="ignore")

    expires: int
    description: str
    title: str
    uri: str
    regions: List[str] = Field(default_factory=list)
    time: int
    severity: Severity

    @property
    def issued_at(self) -> datetime:
        """Issue time as an aware UTC datetime."""
        return _utc(self.time)

    @property
    def expires_at(self) -> datetime:
        """Expiry time as an aware UTC datetime."""
        return _utc(self.expires)

    def is_active(self, at: Optional[datetime] = None) -> bool:
        """Check whether the alert has not yet expired. Naive datetimes are taken as UTC."""
        at = at or datetime.now(timezone.utc)
        if at.tzinfo is None:
            at = at.replace(tzinfo=timezone.utc)
        return self.expires_at > at


class Datapoint(BaseModel):
    """
    Weather conditions at a single point in time.

    All fields are optional except ``time``. Fields marked as daily-only are
    only present on datapoints of the ``daily`` block, and
    ``nearest_storm_*`` only on ``currently``.

    The ``*_error`` fields hold the standard deviation of the matching value.
    Smaller values mean greater confidence; they are omitted where the
    confidence is not known.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    time: int = Field(..., description="Unix time at which the datapoint begins")

    summary: Optional[str] = Field(default=None, description="Human-readable summary")
    icon: Optional[Icon] = None

    temperature: Optional[float] = None
    temperature_error: Optional[StrictFloat] = None
    apparent_temperature: Optional[float] = Field(
        default=None,
        description="Apparent (feels like) temperature, not present on daily",
    )
    dew_point: Optional[float] = None
    dew_point_error: Optional[StrictFloat] = None
    humidity: Optional[float] = None
    humidity_error: Optional[StrictFloat] = None
    pressure: Optional[float] = Field(default=None, description="Sea-level pressure in millibars")
    pressure_error: Optional[StrictFloat] = None
    cloud_cover: Optional[float] = None
    cloud_cover_error: Optional[StrictFloat] = None
    ozone: Optional[float] = Field(default=None, description="Columnar ozone density in Dobson units")
    ozone_error: Optional[StrictFloat] = None
    visibility: Optional[float] = Field(default=None, description="Average visibility, capped at 10 miles")
    visibility_error: Optional[StrictFloat] = None
    uv_index: Optional[int] = None
    uv_index_time: Optional[int] = None

    wind_speed: Optional[float] = None
    wind_speed_error: Optional[StrictFloat] = None
    wind_bearing: Optional[float] = Field(
        default=None,
        description="Direction the wind comes from in degrees, absent when wind speed is 0",
    )
    wind_bearing_error: Optional[StrictFloat] = None
    wind_gust: Optional[float] = None
    wind_gust_time: Optional[int] = None

    precip_intensity: Optional[float] = None
    precip_intensity_error: Optional[StrictFloat] = None
    precip_probability: Optional[float] = None
    precip_probability_error: Optional[StrictFloat] = None
    precip_type: Optional[PrecipitationType] = None
    precip_accumulation: Optional[float] = Field(
        default=None,
        description="Expected snowfall accumulation, hourly and daily only",
    )
    precip_accumulation_error: Optional[StrictFloat] = None

    nearest_storm_distance: Optional[float] = None
    nearest_storm_bearing: Optional[float] = None

    # Daily-only fields
    sunrise_time: Optional[int] = None
    sunset_time: Optional[int] = None
    moon_phase: Optional[float] = Field(default=None, description="Fractional lunation number")
    precip_intensity_max: Optional[float] = None
    precip_intensity_max_error: Optional[StrictFloat] = None
    precip_intensity_max_time: Optional[int] = None
    temperature_high: Optional[float] = None
    temperature_high_time: Optional[int] = None
    temperature_low: Optional[float] = None
    temperature_low_time: Optional[int] = None
    temperature_max: Optional[float] = None
    temperature_max_error: Optional[StrictFloat] = None
    temperature_max_time: Optional[int] = None
    temperature_min: Optional[float] = None
    temperature_min_error: Optional[StrictFloat] = None
    temperature_min_time: Optional[int] = None
    apparent_temperature_max: Optional[float] = None
    apparent_temperature_max_time: Optional[int] = None
    apparent_temperature_min: Optional[float] = None
    apparent_temperature_min_time: Optional[int] = None

    @property
    def timestamp(self) -> datetime:
        """Start of the datapoint as an aware UTC datetime."""
        return _utc(self.time)

    @property
    def sunrise(self) -> Optional[datetime]:
        return _utc(self.sunrise_time)

    @property
    def sunset(self) -> Optional[datetime]:
        return _utc(self.sunset_time)

    @property
    def has_precipitation(self) -> bool:
        """Check if any precipitation is expected at this datapoint."""
        return bool(self.precip_intensity) and self.precip_type is not None


class Datablock(BaseModel):
    """
    A block of datapoints for one time granularity.

    Attributes:
        data: Datapoints in the block, if any data is available
        icon: Icon representing the block's weather
        summary: Written summary of the block's weather
    """

    model_config = ConfigDict(extra="ignore")

    data: Optional[List[Datapoint]] = None
    icon: Optional[Icon] = None
    summary: Optional[str] = None

    @property
    def datapoints(self) -> List[Datapoint]:
        """Datapoints of the block, empty when the API sent none."""
        return self.data or []

    @property
    def count(self) -> int:
        return len(self.datapoints)

    @property
    def is_empty(self) -> bool:
        return self.count == 0

    @property
    def first(self) -> Optional[Datapoint]:
        """Earliest datapoint of the block."""
        return self.datapoints[0] if self.datapoints else None


class Flags(BaseModel):
    """Metadata about the sources and units used to build a forecast."""

    model_config = ConfigDict(
        alias_generator=_to_kebab,
        populate_by_name=True,
        extra="ignore",
    )

    darksky_stations: Optional[List[str]] = None
    darksky_unavailable: Optional[str] = None
    datapoint_stations: Optional[List[str]] = None
    isd_stations: Optional[List[str]] = None
    lamp_stations: Optional[List[str]] = None
    metar_stations: Optional[List[str]] = None
    metno_license: Optional[str] = None
    sources: Optional[List[str]] = None
    units: Optional[str] = None


class Forecast(BaseModel):
    """
    Full forecast response for a location.

    Most blocks are optional since they can be excluded with
    ``Options.exclude``, and some are simply unavailable for a location.

    Attributes:
        latitude: Latitude of the requested location
        longitude: Longitude of the requested location
        timezone: IANA timezone name of the location
        offset: Timezone offset from UTC in hours
        currently: Current conditions
        minutely: Minute-by-minute conditions for the next hour
        hourly: Hour-by-hour conditions for the next two (or seven) days
        daily: Day-by-day conditions for the next week
        alerts: Severe weather alerts for the location
        flags: Metadata about sources and units
    """

    model_config = ConfigDict(extra="ignore")

    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    timezone: str
    offset: Optional[float] = None
    currently: Optional[Datapoint] = None
    minutely: Optional[Datablock] = None
    hourly: Optional[Datablock] = None
    daily: Optional[Datablock] = None
    alerts: List[Alert] = Field(default_factory=list)
    flags: Optional[Flags] = None

    @classmethod
    def from_json(cls, payload: Union[str, bytes]) -> "Forecast":
        """Create from a raw JSON document."""
        return cls.model_validate_json(payload)

    @property
    def has_alerts(self) -> bool:
        return len(self.alerts) > 0

    @property
    def units(self) -> Optional[str]:
        """Unit system the values are expressed in, if flags were returned."""
        return self.flags.units if self.flags else None

    def get_block(self, block: Union[Block, str]) -> Union[Datapoint, Datablock, Flags, None]:
        """
        Get a response block by name.

        Args:
            block: Block to look up (``currently``, ``minutely``, ``hourly``,
                ``daily`` or ``flags``)

        Returns:
            The block, or None if it was excluded or not returned
        """
        return getattr(self, Block(block).value)

    def to_dict(self) -> dict:
        """Convert to a dictionary in the API's wire format."""
        return self.model_dump(by_alias=True, exclude_none=True, mode="json")
