"""Sample Azure VM provisioning: create a VNet, public IP, NIC and VM, list
them, then tear them down."""

__version__ = "0.1.0"
