"""
Seed data for development and first start.
Creates the security catalogs (modules, forms, permissions), the
administrator role with every permission on every form, and an admin
account. Idempotent: existing rows are left untouched.
"""

from sqlalchemy import select
from sqlalchemy.orm import Session

from rest_api.models import (
    Form,
    FormModule,
    Module,
    Permission,
    Person,
    Role,
    RoleFormPermission,
    RoleUser,
    User,
)
from shared.config.logging import get_logger
from shared.config.settings import settings
from shared.security.password import hash_password

logger = get_logger(__name__)


ADMIN_ROLE_NAME = "Administrador"

DEFAULT_MODULES = [
    {"name": "Seguridad", "description": "Personas, usuarios, roles y permisos"},
    {"name": "Asistencia", "description": "Organizaciones, eventos, tarjetas y asistencia"},
]

# Module name -> forms shown in it
DEFAULT_FORMS = {
    "Seguridad": [
        {"name": "Personas", "description": "Gestión de personas"},
        {"name": "Usuarios", "description": "Gestión de usuarios"},
        {"name": "Roles", "description": "Gestión de roles"},
        {"name": "Permisos", "description": "Gestión de permisos"},
        {"name": "Formularios", "description": "Gestión de formularios"},
        {"name": "Módulos", "description": "Gestión de módulos"},
    ],
    "Asistencia": [
        {"name": "Organizaciones", "description": "Gestión de organizaciones y sucursales"},
        {"name": "Eventos", "description": "Gestión de eventos y sesiones"},
        {"name": "Tarjetas", "description": "Gestión de tarjetas QR"},
        {"name": "Asistencias", "description": "Registro de asistencia"},
    ],
}

DEFAULT_PERMISSIONS = [
    {"name": "Ver", "description": "Consultar registros"},
    {"name": "Crear", "description": "Crear registros"},
    {"name": "Editar", "description": "Modificar registros"},
    {"name": "Eliminar", "description": "Eliminar registros"},
]


def _get_or_create(db: Session, model, defaults: dict | None = None, **lookup):
    """Return the row matching lookup, creating it with defaults when absent."""
    instance = db.scalar(select(model).where(*[getattr(model, k) == v for k, v in lookup.items()]))
    if instance is not None:
        return instance, False
    instance = model(**lookup, **(defaults or {}))
    db.add(instance)
    db.flush()
    return instance, True


def seed_catalogs(db: Session) -> tuple[list[Form], list[Permission]]:
    """Modules, forms and permissions."""
    forms: list[Form] = []
    for module_data in DEFAULT_MODULES:
        module, _ = _get_or_create(
            db, Module, defaults={"description": module_data["description"]}, name=module_data["name"]
        )
        for form_data in DEFAULT_FORMS[module.name]:
            form, _ = _get_or_create(
                db, Form, defaults={"description": form_data["description"]}, name=form_data["name"]
            )
            _get_or_create(db, FormModule, form_id=form.id, module_id=module.id)
            forms.append(form)

    permissions = [
        _get_or_create(db, Permission, defaults={"description": p["description"]}, name=p["name"])[0]
        for p in DEFAULT_PERMISSIONS
    ]
    return forms, permissions


def seed_admin(db: Session, forms: list[Form], permissions: list[Permission]) -> None:
    """Administrator role with full access and the admin account."""
    role, created = _get_or_create(
        db, Role, defaults={"description": "Acceso total al sistema"}, name=ADMIN_ROLE_NAME
    )
    if created:
        logger.info("Administrator role created", role_id=role.id)

    for form in forms:
        for permission in permissions:
            _get_or_create(
                db,
                RoleFormPermission,
                role_id=role.id,
                form_id=form.id,
                permission_id=permission.id,
            )

    user = db.scalar(select(User).where(User.username == settings.seed_admin_username))
    if user is None:
        person = Person(
            name="Administrador",
            last_name="Sistema",
            email=settings.seed_admin_email,
        )
        db.add(person)
        db.flush()

        user = User(
            username=settings.seed_admin_username,
            password=hash_password(settings.seed_admin_password),
            person_id=person.id,
        )
        db.add(user)
        db.flush()
        logger.info("Admin user created", username=user.username)

    _get_or_create(db, RoleUser, role_id=role.id, user_id=user.id)


def seed(db: Session) -> None:
    """Seed everything in one transaction."""
    logger.info("Seeding database")
    try:
        forms, permissions = seed_catalogs(db)
        seed_admin(db, forms, permissions)
        db.commit()
    except Exception:
        db.rollback()
        logger.error("Seeding failed", exc_info=True)
        raise
    logger.info("Seed completed", forms=len(forms), permissions=len(permissions))
