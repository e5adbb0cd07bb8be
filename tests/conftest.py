from __future__ import annotations

import pytest


QINGDAO_REPORT = """Qingdao, China (ZSQD) 36-04N 120-20E 77M
Mar 28, 2021 - 04:00 AM EDT / 2021.03.28 0800 UTC
Wind: from the NNW (340 degrees) at 16 MPH (14 KT):0
Visibility: 1 mile(s):0
Sky conditions: overcast
Weather: widespread dust
Temperature: 64 F (18 C)
Dew Point: 42 F (6 C)
Relative Humidity: 45%
Pressure (altimeter): 29.65 in. Hg (1004 hPa)"""

VOBL_REPORT = """Station name not available
May 16, 2021 - 06:30 AM EDT / 2021.05.16 1030 UTC
Wind: from the SSW (200 degrees) at 12 MPH (10 KT) (direction variable):0
Visibility: 4 mile(s):0
Sky conditions: partly cloudy
Temperature: 80 F (27 C)
Dew Point: 66 F (19 C)
Relative Humidity: 61%
Pressure (altimeter): 29.80 in. Hg (1009 hPa)
extra"""

KYKM_REPORT = """YAKIMA AIR TERMINAL, WA, United States (KYKM) 46-34N 120-32W 324M
Dec 30, 2023 - 10:53 PM EST / 2023.12.31 0353 UTC
Wind: Calm:0
Visibility: 5 mile(s):0
Sky conditions: overcast
Weather: mist
Temperature: 42.1 F (5.6 C)
Dew Point: 39.0 F (3.9 C)
Relative Humidity: 88%
Pressure (altimeter): 30.05 in. Hg (1017 hPa)
ob: KYKM 310353Z AUTO 00000KT 5SM BR OVC025 06/04 A3005 RMK AO2 SLP185 T00560039
cycle: 4"""

VOGO_REPORT = """Station name not available
Dec 30, 2023 - 07:30 AM EST / 2023.12.30 1230 UTC
Wind: from the NNW (340 degrees) at 7 MPH (6 KT):0
Visibility: 3 mile(s):0
Temperature: 84 F (29 C)
Dew Point: 71 F (22 C)
Relative Humidity: 65%
Pressure (altimeter): 29.83 in. Hg (1010 hPa)
ob: VOGO 301230Z 34006KT 6000 NSC 29/22 Q1010 NOSIG
cycle: 12"""


@pytest.fixture()
def qingdao_report() -> str:
    return QINGDAO_REPORT


@pytest.fixture()
def vobl_report() -> str:
    return VOBL_REPORT


@pytest.fixture()
def kykm_report() -> str:
    return KYKM_REPORT


@pytest.fixture()
def vogo_report() -> str:
    return VOGO_REPORT
