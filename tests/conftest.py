"""Shared statement text fixtures."""
import pytest

RELEASE_2023 = """
Share Units - Release (R000345)
    Release Date:                              15-Mar-2023
    Settlement Date:                           17-Mar-2023
    Release Price:                             $45.50 USD
    Number of Restricted Awards Released:      100
    Number of Restricted Awards Withheld:      40
    Number of Restricted Awards Issued:        60
"""

# Two releases out of date order, older layout labels, one without withholding,
# a sale, ESPP activity lines, and a trailing disclaimer that also starts with
# the withdrawal marker.
STATEMENT = """ACME Corp Stock Plan Statement
Account: XXXX-1234                 Period: 01-Jan-2021 to 31-Dec-2022
Settlement Date: 01-Jan-2020

Share Units - Release (R000101)
    Release Date:                              01-Jan-2022
    Settlement Date:                           04-Jan-2022
    Release Price:                             $1,045.50 USD
    Number of Restricted Awards Released:      1,200
    Number of Restricted Awards Sold:          480
    Number of Restricted Awards Disbursed:     720

Share Units - Release (R000077)
    Release Date:                              01-Jan-2021
    Settlement Date:                           05-Jan-2021
    Release Price:                             $30.00 USD
    Number of Restricted Awards Released:      50
    Number of Restricted Awards Issued:        50

Withdrawal on 10-Feb-2022 (Sale of Shares)
    Settlement Date:                           14-Feb-2022
    Market Price Per Unit:                     $1,100.25 USD
    Shares Sold:                               300

ESPP Activity
    30-Jun-2021      You bought      $1,275.00      30      $42.50
    31-Dec-2021      You bought      $990.00        20      $49.50

Withdrawal on request is subject to plan rules and applicable law.
"""

PURCHASE_HISTORY = """Employee Stock Purchase Plan
Purchase History
Offering Date   Grant Date    Grant Price   Purchase Date   Purchase FMV   Purchase Price   Shares
01-Jan-2023     01-Jan-2023   $50.00        30-Jun-2023     $55.00         $42.50           40
01-Jul-2022     01-Jul-2022   $48.00        31-Dec-2022     $52.00         $40.80           35
"""


@pytest.fixture
def release_text():
    return RELEASE_2023


@pytest.fixture
def statement_text():
    return STATEMENT


@pytest.fixture
def purchase_history_text():
    return PURCHASE_HISTORY
