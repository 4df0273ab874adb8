from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .database.connection import DBConfig, DatabaseConnection
from .database.gateway import DataGateway
from .database.mysql_gateway import MySQLGateway
from .departments.gateway_department_repository import GatewayDepartmentRepository
from .departments.service import DepartmentService
from .employees.gateway_employee_repository import GatewayEmployeeRepository
from .employees.service import EmployeeService
from .notifications.gateway_notification_repository import GatewayNotificationRepository
from .notifications.service import NotificationService
from .permissions.gateway_permission_repository import GatewayPermissionRepository
from .reports.service import ReportService
from .settings.model import ConsoleSettings
from .settings.service import SettingsService
from .shifts.gateway_shift_repository import GatewayShiftRepository
from .shifts.service import ShiftService
from .state.loader import StateLoader
from .state.store import AppStore
from .time_tracking.gateway_time_entry_repository import GatewayTimeEntryRepository
from .time_tracking.service import TimeTrackingService
from .users.model import User


@dataclass(frozen=True)
class Container:
    gateway: DataGateway

    employees_repo: GatewayEmployeeRepository
    departments_repo: GatewayDepartmentRepository
    permissions_repo: GatewayPermissionRepository
    shifts_repo: GatewayShiftRepository
    time_entries_repo: GatewayTimeEntryRepository
    notifications_repo: GatewayNotificationRepository

    notification_service: NotificationService
    employee_service: EmployeeService
    department_service: DepartmentService
    shift_service: ShiftService
    time_tracking_service: TimeTrackingService
    settings_service: SettingsService
    report_service: ReportService

    store: AppStore
    conn: Optional[DatabaseConnection] = None


def wire(
    gateway: DataGateway,
    *,
    current_user: Optional[User] = None,
    settings: Optional[ConsoleSettings] = None,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build repositories, services and the state store on top of ``gateway``."""

    employees_repo = GatewayEmployeeRepository(gateway)
    departments_repo = GatewayDepartmentRepository(gateway)
    permissions_repo = GatewayPermissionRepository(gateway)
    shifts_repo = GatewayShiftRepository(gateway)
    time_entries_repo = GatewayTimeEntryRepository(gateway)
    notifications_repo = GatewayNotificationRepository(gateway)

    notification_service = NotificationService(notifications_repo)
    employee_service = EmployeeService(
        employees_repo,
        permissions_repo,
        shifts_repo,
        time_entries_repo,
        notification_service,
    )
    department_service = DepartmentService(departments_repo)
    shift_service = ShiftService(shifts_repo, employees_repo, notification_service)
    time_tracking_service = TimeTrackingService(time_entries_repo, employees_repo, notification_service)
    settings_service = SettingsService(notification_service)

    loader = StateLoader(
        employees=employees_repo,
        departments=departments_repo,
        permissions=permissions_repo,
        shifts=shifts_repo,
        time_entries=time_entries_repo,
        notifications=notification_service,
    )
    store = AppStore(
        loader,
        employees=employee_service,
        departments=department_service,
        shifts=shift_service,
        time_tracking=time_tracking_service,
        notifications=notification_service,
        settings=settings_service,
        current_user=current_user,
        initial_settings=settings,
    )

    return Container(
        gateway=gateway,
        employees_repo=employees_repo,
        departments_repo=departments_repo,
        permissions_repo=permissions_repo,
        shifts_repo=shifts_repo,
        time_entries_repo=time_entries_repo,
        notifications_repo=notifications_repo,
        notification_service=notification_service,
        employee_service=employee_service,
        department_service=department_service,
        shift_service=shift_service,
        time_tracking_service=time_tracking_service,
        settings_service=settings_service,
        report_service=ReportService(),
        store=store,
        conn=conn,
    )


def build_container(*, db_url: Optional[str], db_key: Optional[str], current_user: Optional[User] = None) -> Container:
    config = DBConfig.from_settings(db_url, db_key)
    conn = DatabaseConnection.get_instance(config)
    return wire(MySQLGateway(conn), current_user=current_user, conn=conn)
