import datetime
from dataclasses import dataclass


def time_suffix(
    now: datetime.datetime | None = None, include_year: bool = False
) -> str:
    """
    Build a numeric suffix from the current time, two digits per field
        e.g. 2024-03-07 09:05:01 -> '0307090501'
             with include_year    -> '240307090501'
    Runs started within the same second get the same suffix.
    """
    if now is None:
        now = datetime.datetime.now()
    parts = [now.month, now.day, now.hour, now.minute, now.second]
    if include_year:
        parts.insert(0, now.year % 100)
    return "".join(f"{p:02d}" for p in parts)


@dataclass
class ResourceNames:
    vnet: str
    subnet: str
    public_ip: str
    ip_config: str
    nic: str
    vm: str
    storage_account: str

    @staticmethod
    def generate(suffix: str) -> "ResourceNames":
        return ResourceNames(
            vnet=f"vnet-{suffix}",
            subnet=f"subnet-{suffix}",
            public_ip=f"pip-{suffix}",
            ip_config=f"ipconfig-{suffix}",
            nic=f"nic-{suffix}",
            vm=f"vm-{suffix}",
            # Storage account names are lowercase alphanumeric only
            storage_account=f"sa{suffix}",
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "vnet": self.vnet,
            "subnet": self.subnet,
            "publicIp": self.public_ip,
            "ipConfig": self.ip_config,
            "nic": self.nic,
            "vm": self.vm,
            "storageAccount": self.storage_account,
        }
