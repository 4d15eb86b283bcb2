"""Literal ``netsh wlan`` outputs used across the tests."""

NETWORKS_OUTPUT = (
    "\r\n"
    "Interface name : Wi-Fi\r\n"
    "There are 3 networks currently visible.\r\n"
    "\r\n"
    "SSID 1 : HomeNet\r\n"
    "    Network type            : Infrastructure\r\n"
    "    Authentication          : WPA2-Personal\r\n"
    "    Encryption              : CCMP\r\n"
    "    BSSID 1                 : aa:bb:cc:dd:ee:01\r\n"
    "         Signal             : 92%\r\n"
    "         Radio type         : 802.11ac\r\n"
    "         Channel            : 36\r\n"
    "\r\n"
    "SSID 2 : CoffeeShop\r\n"
    "    Network type            : Infrastructure\r\n"
    "    Authentication          : Open\r\n"
    "    Encryption              : None\r\n"
    "    BSSID 1                 : aa:bb:cc:dd:ee:02\r\n"
    "         Signal             : 41%\r\n"
    "         Radio type         : 802.11n\r\n"
    "         Channel            : 6\r\n"
    "\r\n"
    "SSID 3 : Office 5G\r\n"
    "    Network type            : Infrastructure\r\n"
    "    Authentication          : WPA3-Personal\r\n"
    "    Encryption              : GCMP\r\n"
    "    BSSID 1                 : aa:bb:cc:dd:ee:03\r\n"
    "         Signal             : 67%\r\n"
    "         Radio type         : 802.11ax\r\n"
    "         Channel            : 149\r\n"
    "\r\n"
)

# Same shape, Unix line endings, plus an empty SSID, a header-token SSID
# and a block missing most fields.
NETWORKS_OUTPUT_ODD = """
Interface name : wlan0
There are 4 networks currently visible.

SSID 1 :
    Network type            : Infrastructure
    Authentication          : WPA2-Personal
    Encryption              : CCMP

SSID 2 : SSID
    Network type            : Infrastructure

SSID 3 : Bare

SSID 4 : Lab
    Network type            : Adhoc
    Authentication          : WPA2-Enterprise
    Encryption              : CCMP
    BSSID 1                 : aa:bb:cc:dd:ee:04
         Signal             : 15%
"""

INTERFACES_CONNECTED = (
    "\r\n"
    "There is 1 interface on the system:\r\n"
    "\r\n"
    "    Name                   : Wi-Fi\r\n"
    "    Description            : Intel(R) Wi-Fi 6 AX201 160MHz\r\n"
    "    State                  : connected\r\n"
    "    SSID                   : HomeNet\r\n"
    "    BSSID                  : aa:bb:cc:dd:ee:01\r\n"
    "    Network type           : Infrastructure\r\n"
    "    Radio type             : 802.11ac\r\n"
    "    Authentication         : WPA2-Personal\r\n"
    "    Cipher                 : CCMP\r\n"
    "    Encryption             : AES\r\n"
    "    Connection mode        : Auto Connect\r\n"
    "    Channel                : 36\r\n"
    "    Receive rate (Mbps)    : 866.7\r\n"
    "    Transmit rate (Mbps)   : 866.7\r\n"
    "    Signal                 : 88%\r\n"
    "    Profile                : HomeNet\r\n"
    "\r\n"
    "    Hosted network status  : Not available\r\n"
)

INTERFACES_ELSEWHERE = INTERFACES_CONNECTED.replace("HomeNet", "Neighbour")

INTERFACES_DISCONNECTED = (
    "\r\n"
    "There is 1 interface on the system:\r\n"
    "\r\n"
    "    Name                   : Wi-Fi\r\n"
    "    Description            : Intel(R) Wi-Fi 6 AX201 160MHz\r\n"
    "    State                  : disconnected\r\n"
    "    Radio status           : Hardware On\r\n"
    "                             Software On\r\n"
    "\r\n"
    "    Hosted network status  : Not available\r\n"
)

INTERFACES_SSID_ONLY = "    SSID                   : Bare\n"
