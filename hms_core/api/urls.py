# hms_core/api/urls.py
from __future__ import annotations

from django.urls import path

from hms_core.api.dropdowns import DropdownViewSet
from hms_core.appointments.api.views import AppointmentViewSet
from hms_core.dashboard.api.views import AdminDashboardView, DoctorDashboardView
from hms_core.doctors.api.views import DoctorViewSet
from hms_core.iam.api.auth import LoginView, LogoutView
from hms_core.iam.api.me import MeView
from hms_core.medical_records.api.views import MedicalRecordViewSet
from hms_core.patients.api.views import PatientViewSet
from hms_core.payments.api.views import PaymentViewSet
from hms_core.specializations.api.views import SpecializationViewSet


def crud_routes(viewset, *, plural: str, singular: str) -> list:
    """
    Flat verb routes shared by every archivable collection:
      GET  get<plural>            GET  get<plural>/<id>
      POST create<singular>       POST update<singular>/<id>
      POST delete<singular>/<id>  POST restore<singular>/<id>
    """
    return [
        path(f"get{plural}", viewset.as_view({"get": "list"}), name=f"{plural}-list"),
        path(f"get{plural}/<int:pk>", viewset.as_view({"get": "retrieve"}), name=f"{plural}-detail"),
        path(f"create{singular}", viewset.as_view({"post": "create"}), name=f"{singular}-create"),
        path(f"update{singular}/<int:pk>", viewset.as_view({"post": "update"}), name=f"{singular}-update"),
        path(f"delete{singular}/<int:pk>", viewset.as_view({"post": "archive"}), name=f"{singular}-archive"),
        path(f"restore{singular}/<int:pk>", viewset.as_view({"post": "restore"}), name=f"{singular}-restore"),
    ]


def action_route(viewset, verb: str, singular: str, action: str):
    return path(f"{verb}{singular}/<int:pk>", viewset.as_view({"post": action}), name=f"{singular}-{action}")


urlpatterns = [
    # Auth + /me
    path("login", LoginView.as_view(), name="login"),
    path("logout", LogoutView.as_view(), name="logout"),
    path("me", MeView.as_view(), name="me"),

    # Appointments
    *crud_routes(AppointmentViewSet, plural="appointments", singular="appointment"),
    action_route(AppointmentViewSet, "approve", "appointment", "approve"),
    action_route(AppointmentViewSet, "reject", "appointment", "reject"),
    action_route(AppointmentViewSet, "complete", "appointment", "complete"),
    action_route(AppointmentViewSet, "cancel", "appointment", "cancel"),
    path("getmyappointments", AppointmentViewSet.as_view({"get": "mine"}), name="appointments-mine"),

    # Profiles / reference data / records
    *crud_routes(SpecializationViewSet, plural="specializations", singular="specialization"),
    *crud_routes(DoctorViewSet, plural="doctors", singular="doctor"),
    *crud_routes(PatientViewSet, plural="patients", singular="patient"),
    *crud_routes(MedicalRecordViewSet, plural="medicalrecords", singular="medicalrecord"),
    *crud_routes(PaymentViewSet, plural="payments", singular="payment"),
    action_route(PaymentViewSet, "confirm", "payment", "confirm"),

    # Dashboards
    path("admindashboard", AdminDashboardView.as_view(), name="admin-dashboard"),
    path("doctordashboard", DoctorDashboardView.as_view(), name="doctor-dashboard"),

    # Dropdowns
    path("dropdown/getpatients", DropdownViewSet.as_view({"get": "patients"}), name="dropdown-patients"),
    path("dropdown/getdoctors", DropdownViewSet.as_view({"get": "doctors"}), name="dropdown-doctors"),
    path(
        "dropdown/getspecializations",
        DropdownViewSet.as_view({"get": "specializations"}),
        name="dropdown-specializations",
    ),
    path("dropdown/getappointments", DropdownViewSet.as_view({"get": "appointments"}), name="dropdown-appointments"),
    path(
        "dropdown/getdoctorsbyspecialization/<int:pk>",
        DropdownViewSet.as_view({"get": "doctors_by_specialization"}),
        name="dropdown-doctors-by-specialization",
    ),
]
