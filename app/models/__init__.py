# Fleet Tracker — Database Models
# Import all models here for SQLAlchemy discovery

from app.models.security_officer import SecurityOfficer          # noqa
from app.models.corporate_vehicle import CorporateVehicle        # noqa
from app.models.driver import Driver                             # noqa
from app.models.assignment import VehicleDriverAssignment        # noqa
from app.models.location_point import LocationPoint              # noqa
from app.models.route import Route                               # noqa
