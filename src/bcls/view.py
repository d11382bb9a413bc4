from bcls.printer import Column
from bcls.style import general_style, name_style, subtle_style, instance_status_style

NAME = Column('NAME', 50, lambda i: i.name, name_style)
IP = Column('IP', 18, lambda i: i.ip, general_style)
ZONE = Column('ZONE', 28, lambda i: i.zone, general_style)
MACHINE_TYPE = Column('MACHINE TYPE', 28, lambda i: i.machine_type, general_style)
CPU_PLATFORM = Column('CPU PLATFORM', 24, lambda i: i.cpu_platform, subtle_style)
STATUS = Column('STATUS', 16, lambda i: i.status, instance_status_style)
LABELS = Column('LABELS', 80, lambda i: i.labels_str(), subtle_style)

DEFAULT_COLUMNS = [NAME, IP, ZONE, MACHINE_TYPE, CPU_PLATFORM, STATUS, LABELS]
