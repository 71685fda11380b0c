from maasclient.models.machine import Machine

# Form keys
ZONE_KEY = "zone"
TAG_KEY = "tags"
SYSTEM_ID_KEY = "system_id"
NAME_KEY = "name"
CPU_COUNT_KEY = "cpu_count"
MEMORY_KEY = "mem"
POOL_KEY = "pool"
OS_SYSTEM_KEY = "osystem"
USER_DATA_KEY = "user_data"
DISTRO_SERIES_KEY = "distro_series"
SWAP_SIZE_KEY = "swap_size"
HOSTNAME_KEY = "hostname"
ERASE_KEY = "erase"
QUICK_ERASE_KEY = "quick_erase"
SECURE_ERASE_KEY = "secure_erase"
FORCE_KEY = "force"
COMMENT_KEY = "comment"
TRUE = "true"

OP_ALLOCATE = "allocate"
OP_DEPLOY = "deploy"
OP_RELEASE = "release"
OP_POWER_ON = "power_on"


class _MachinesCore:
    ENDPOINT = "/machines/"
    MACHINE_PATH = "/machines/{system_id}/"

    @classmethod
    def machine_path(cls, system_id: str) -> str:
        return cls.MACHINE_PATH.format(system_id=system_id)

    def parse_one(self, envelope) -> Machine:
        return self._decode(envelope, Machine)

    def parse_many(self, envelope) -> list[Machine]:
        return self._decode(envelope, Machine, many=True)
