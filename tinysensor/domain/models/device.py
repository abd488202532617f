"""Device domain model — maps to the 'devices' table."""

from sqlalchemy import Column, Integer, String

from tinysensor.infrastructure.database import Base


class Device(Base):
    __tablename__ = "devices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    model = Column("device_name", String(60), nullable=False, index=True)
    serialnumber = Column("serial_number", String(255), nullable=True)
    mac = Column("mac_address", String(17), unique=True, nullable=True)
    ip = Column("ip_address", String(39), nullable=True)
    image_url = Column("image", String(512), nullable=True)

    def __repr__(self):
        return f"<Device {self.id} - {self.model} ({self.mac})>"
