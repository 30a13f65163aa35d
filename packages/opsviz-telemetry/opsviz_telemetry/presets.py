"""Series presets for every console screen."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SeriesSpec:
    """Shape parameters for one chart's series."""

    name: str
    title: str
    base: float
    variance: float
    trend: float = 0.0
    count: int = 24
    unit: str = ""


PRESETS: dict[str, tuple[SeriesSpec, ...]] = {
    "dashboard": (
        SeriesSpec("power", "Power Consumption", 150, 40, unit="kW"),
        SeriesSpec("motor", "Motor Performance", 75, 25, 0.5, unit="%"),
        SeriesSpec("network", "Network Latency", 20, 15, -0.2, unit="ms"),
        SeriesSpec("thermal", "Thermal Monitoring", 60, 10, unit="°C"),
    ),
    "ai_insights": (
        SeriesSpec("energy", "Energy Optimization", 100, 20, -0.8, unit="kW"),
        SeriesSpec("efficiency", "Machine Efficiency", 78, 12, 0.5, unit="%"),
        SeriesSpec("maintenance", "Predicted Failure Rate", 15, 8, -0.3, unit="%"),
        SeriesSpec("process", "Process Efficiency", 85, 15, 0.8, unit="%"),
    ),
    "alerts": (
        SeriesSpec("frequency", "Alert Frequency", 12, 8, unit="Count"),
        SeriesSpec("resolution", "Resolution Time", 45, 15, -0.5, unit="Minutes"),
        SeriesSpec("affected", "Systems Affected", 3, 2, unit="Count"),
    ),
    "testing": (
        SeriesSpec("stress", "Material Stress Response", 65, 25, unit="MPa"),
        SeriesSpec("temperature", "Component Temperature", 80, 15, 0.1, unit="°C"),
        SeriesSpec("fault_rate", "Fault Detection Rate", 2, 3, -0.05, unit="%"),
    ),
    "aircraft": (
        SeriesSpec("efficiency", "Aerodynamic Efficiency", 85, 10, unit="%"),
        SeriesSpec("temperature", "Engine Temperature", 65, 15, unit="°C"),
        SeriesSpec("battery", "Battery Level", 80, 20, -0.5, unit="%"),
        SeriesSpec("signal", "Signal Strength", 95, 5, -0.1, unit="%"),
    ),
    "engine_bay": (
        SeriesSpec("power", "Power Consumption", 250, 50, unit="kW"),
        SeriesSpec("calibration", "Motor Calibration", 99, 1, unit="%"),
        SeriesSpec("temperature", "Cooling Efficiency", 65, 10, unit="°C"),
    ),
    "warehouse": (
        SeriesSpec("consumption", "Daily Consumption Rate", 45, 15, unit="Units"),
        SeriesSpec("restocking", "Restocking Timeline", 60, 30, unit="Units"),
        SeriesSpec("forecast", "Demand Forecast", 55, 10, 1, unit="Units"),
    ),
    "robotic_arm": (
        SeriesSpec("torque", "Torque", 65, 15, unit="N·m"),
        SeriesSpec("rpm", "Joint RPM", 120, 40, unit="RPM"),
        SeriesSpec("heat", "Heat Generation", 45, 10, 0.2, unit="°C"),
    ),
    "server_room": (
        SeriesSpec("latency", "Network Latency", 15, 8, unit="ms"),
        SeriesSpec("load", "Network Load", 65, 20, 0.3, unit="%"),
        SeriesSpec("temperature", "System Temperature", 55, 10, unit="°C"),
        SeriesSpec("performance", "Performance Metrics", 85, 10, -0.2, unit="%"),
    ),
}
