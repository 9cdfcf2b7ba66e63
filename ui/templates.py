"""Jinja templates for the MediTrack pages, served through a DictLoader."""

from __future__ import annotations

from typing import Dict

BOOTSTRAP_HEAD = """
    <meta charset=\"utf-8\">
    <meta name=\"viewport\" content=\"width=device-width, initial-scale=1\">
    <title>{% block title %}MediTrack{% endblock %}</title>
    <link
      href=\"https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/css/bootstrap.min.css\"
      rel=\"stylesheet\"
      integrity=\"sha384-QWTKZyjpPEjISv5WaRU9OFeRpok6YctnYmDr5pNlyT2bRjXh0JMhjY6hW+ALEwIH\"
      crossorigin=\"anonymous\"
    >
    <link
      href=\"https://cdn.jsdelivr.net/npm/bootstrap-icons@1.11.3/font/bootstrap-icons.min.css\"
      rel=\"stylesheet\"
    >
"""

BOOTSTRAP_SCRIPTS = """
    <script
      src=\"https://cdn.jsdelivr.net/npm/bootstrap@5.3.3/dist/js/bootstrap.bundle.min.js\"
      integrity=\"sha384-YvpcrYf0tY3lHB60NNkmXc5s9fDVZLESaAA55NDzOxhy9GkcIdslK1eN7N6jIeHz\"
      crossorigin=\"anonymous\"
    ></script>
    <script>
      document.querySelectorAll('.toast').forEach(function (el) {
        bootstrap.Toast.getOrCreateInstance(el).show();
      });
    </script>
"""

TOASTS = """
    <div class=\"toast-container position-fixed bottom-0 end-0 p-3\">
      {% with messages = get_flashed_messages(with_categories=true) %}
        {% for category, message in messages %}
          <div class=\"toast border-{{ category }}\" role=\"status\" aria-live=\"polite\" aria-atomic=\"true\">
            <div class=\"toast-header\">
              <strong class=\"me-auto text-{{ category }}\">{{ message.title }}</strong>
              <button type=\"button\" class=\"btn-close\" data-bs-dismiss=\"toast\" aria-label=\"Close\"></button>
            </div>
            <div class=\"toast-body\">{{ message.description }}</div>
          </div>
        {% endfor %}
      {% endwith %}
    </div>
"""

LAYOUT = (
    """<!doctype html>
<html lang=\"en\">
  <head>"""
    + BOOTSTRAP_HEAD
    + """  </head>
  <body class=\"bg-light\">
    <nav class=\"navbar navbar-expand-lg navbar-dark bg-primary\">
      <div class=\"container\">
        <a class=\"navbar-brand\" href=\"{{ url_for('dashboard') }}\"><i class=\"bi bi-heart-pulse\"></i> MediTrack</a>
        <ul class=\"navbar-nav me-auto\">
          {% for endpoint, label in nav_links %}
            <li class=\"nav-item\">
              <a class=\"nav-link {% if request.endpoint == endpoint %}active{% endif %}\" href=\"{{ url_for(endpoint) }}\">{{ label }}</a>
            </li>
          {% endfor %}
        </ul>
        {% if current_user %}
          <span class=\"navbar-text text-white me-3\">{{ current_user.full_name }}</span>
          <form method=\"post\" action=\"{{ url_for('logout') }}\" class=\"d-inline\">
            <button type=\"submit\" class=\"btn btn-outline-light btn-sm\">Sign Out</button>
          </form>
        {% endif %}
      </div>
    </nav>
    <main class=\"container my-4\">
      {% block content %}{% endblock %}
    </main>"""
    + TOASTS
    + BOOTSTRAP_SCRIPTS
    + """  </body>
</html>
"""
)

PUBLIC_LAYOUT = (
    """<!doctype html>
<html lang=\"en\">
  <head>"""
    + BOOTSTRAP_HEAD
    + """  </head>
  <body>
    {% block content %}{% endblock %}"""
    + TOASTS
    + BOOTSTRAP_SCRIPTS
    + """  </body>
</html>
"""
)

LANDING = """{% extends "public_layout.html" %}
{% block content %}
<section class=\"py-5 text-center bg-light\">
  <div class=\"container py-4\">
    <i class=\"bi bi-heart-pulse text-primary display-1\"></i>
    <h1 class=\"display-4 fw-bold my-4\">Welcome to <span class=\"text-primary\">MediTrack</span></h1>
    <p class=\"lead text-muted mx-auto mb-4\" style=\"max-width: 48rem;\">
      Your comprehensive healthcare companion. Manage appointments, track medications,
      and take control of your health journey with our intuitive platform.
    </p>
    <div class=\"d-flex flex-column flex-sm-row gap-3 justify-content-center\">
      <a class=\"btn btn-primary btn-lg\" href=\"{{ url_for('register') }}\">Get Started Today</a>
      <a class=\"btn btn-outline-secondary btn-lg\" href=\"{{ url_for('login') }}\">Sign In</a>
    </div>
  </div>
</section>
<section class=\"py-5 bg-white\">
  <div class=\"container\">
    <div class=\"text-center mb-5\">
      <h2 class=\"fw-bold\">Everything you need for better health management</h2>
      <p class=\"lead text-muted\">Powerful features designed to simplify your healthcare experience</p>
    </div>
    <div class=\"row g-4\">
      {% for feature in features %}
        <div class=\"col-md-6 col-lg-4\">
          <div class=\"card h-100 shadow-sm\">
            <div class=\"card-body\">
              <h3 class=\"h5 card-title\"><i class=\"bi bi-{{ feature.icon }} text-primary me-2\"></i>{{ feature.title }}</h3>
              <p class=\"card-text text-muted\">{{ feature.description }}</p>
            </div>
          </div>
        </div>
      {% endfor %}
    </div>
  </div>
</section>
<section class=\"py-5 bg-primary text-center\">
  <div class=\"container\">
    <h2 class=\"fw-bold text-white\">Ready to take control of your health?</h2>
    <p class=\"lead text-white-50 mb-4\">
      Join thousands of users who trust MediTrack for their healthcare management needs.
    </p>
    <a class=\"btn btn-light btn-lg text-primary\" href=\"{{ url_for('register') }}\">Start Your Journey</a>
  </div>
</section>
{% endblock %}
"""

LOGIN = """{% extends "public_layout.html" %}
{% block title %}Sign In - MediTrack{% endblock %}
{% block content %}
<div class=\"container py-5\" style=\"max-width: 28rem;\">
  <h1 class=\"h3 mb-4 text-center\">Sign in to MediTrack</h1>
  <form method=\"post\" action=\"{{ url_for('login', next=next_url) if next_url else url_for('login') }}\" class=\"card card-body shadow-sm\">
    <div class=\"mb-3\">
      <label for=\"email\" class=\"form-label\">Email</label>
      <input id=\"email\" name=\"email\" type=\"email\" class=\"form-control\" required>
    </div>
    <div class=\"mb-3\">
      <label for=\"firstName\" class=\"form-label\">First Name</label>
      <input id=\"firstName\" name=\"first_name\" class=\"form-control\" placeholder=\"Optional\">
    </div>
    <button type=\"submit\" class=\"btn btn-primary w-100\">Sign In</button>
    <p class=\"text-muted small mt-3 mb-0 text-center\">
      New here? <a href=\"{{ url_for('register') }}\">Create an account</a>
    </p>
  </form>
</div>
{% endblock %}
"""

REGISTER = """{% extends "public_layout.html" %}
{% block title %}Register - MediTrack{% endblock %}
{% block content %}
<div class=\"container py-5\" style=\"max-width: 28rem;\">
  <h1 class=\"h3 mb-4 text-center\">Create your MediTrack account</h1>
  <form method=\"post\" action=\"{{ url_for('register') }}\" class=\"card card-body shadow-sm\">
    <div class=\"row g-3 mb-3\">
      <div class=\"col\">
        <label for=\"firstName\" class=\"form-label\">First Name</label>
        <input id=\"firstName\" name=\"first_name\" class=\"form-control\" required>
      </div>
      <div class=\"col\">
        <label for=\"lastName\" class=\"form-label\">Last Name</label>
        <input id=\"lastName\" name=\"last_name\" class=\"form-control\" required>
      </div>
    </div>
    <div class=\"mb-3\">
      <label for=\"email\" class=\"form-label\">Email</label>
      <input id=\"email\" name=\"email\" type=\"email\" class=\"form-control\" required>
    </div>
    <button type=\"submit\" class=\"btn btn-primary w-100\">Create Account</button>
    <p class=\"text-muted small mt-3 mb-0 text-center\">
      Already registered? <a href=\"{{ url_for('login') }}\">Sign in</a>
    </p>
  </form>
</div>
{% endblock %}
"""

DASHBOARD = """{% extends "layout.html" %}
{% block title %}Dashboard - MediTrack{% endblock %}
{% block content %}
<div class=\"mb-4\">
  <h1 class=\"h2 fw-bold\">Welcome back, {{ display_name }}!</h1>
  <p class=\"text-muted\">Here's an overview of your health management dashboard</p>
</div>
<section class=\"row g-4 mb-4\">
  {% for stat in stats %}
    <div class=\"col-md-6 col-lg-3\">
      <div class=\"card shadow-sm h-100\">
        <div class=\"card-body d-flex justify-content-between align-items-center\">
          <div>
            <p class=\"text-muted small mb-1\">{{ stat.title }}</p>
            <p class=\"h2 fw-bold mb-0\">{{ stat.value }}</p>
          </div>
          <i class=\"bi bi-{{ stat.icon }} fs-2 text-{{ stat.color }}\"></i>
        </div>
      </div>
    </div>
  {% endfor %}
</section>
<section class=\"row g-4 mb-4\">
  <div class=\"col-lg-6\">
    <div class=\"card shadow-sm h-100\">
      <div class=\"card-header\"><i class=\"bi bi-calendar\"></i> Upcoming Appointments</div>
      <div class=\"card-body\">
        <p class=\"text-muted small\">Your next scheduled medical appointments</p>
        {% for appointment in upcoming_appointments %}
          <div class=\"d-flex justify-content-between align-items-center p-3 mb-2 bg-light rounded\">
            <div>
              <h2 class=\"h6 mb-1\">{{ appointment.doctor_name }}</h2>
              <p class=\"small text-muted mb-1\">{{ appointment.reason }}</p>
              <span class=\"small text-muted\"><i class=\"bi bi-clock\"></i> {{ appointment.appointment_date|display_date }}</span>
            </div>
            <span class=\"badge text-bg-{{ appointment_badges[appointment.status] }}\">{{ appointment.status }}</span>
          </div>
        {% else %}
          <p class=\"text-muted text-center py-4 mb-0\">No upcoming appointments</p>
        {% endfor %}
      </div>
    </div>
  </div>
  <div class=\"col-lg-6\">
    <div class=\"card shadow-sm h-100\">
      <div class=\"card-header\"><i class=\"bi bi-capsule\"></i> Active Prescriptions</div>
      <div class=\"card-body\">
        <p class=\"text-muted small\">Your current medication schedule</p>
        {% for prescription in active_prescriptions %}
          <div class=\"d-flex justify-content-between align-items-center p-3 mb-2 bg-light rounded\">
            <div>
              <h2 class=\"h6 mb-1\">{{ prescription.medicine_name }}</h2>
              <p class=\"small text-muted mb-1\">{{ prescription.dosage }} - {{ prescription.frequency }}</p>
              <span class=\"small text-muted\"><i class=\"bi bi-graph-up\"></i> Until {{ prescription.end_date|display_date }}</span>
            </div>
            <span class=\"badge text-bg-success\">Active</span>
          </div>
        {% else %}
          <p class=\"text-muted text-center py-4 mb-0\">No active prescriptions</p>
        {% endfor %}
      </div>
    </div>
  </div>
</section>
<section class=\"card shadow-sm\">
  <div class=\"card-header\">Quick Actions</div>
  <div class=\"card-body\">
    <p class=\"text-muted small\">Common tasks to manage your health</p>
    <div class=\"row g-3\">
      {% for action in quick_actions %}
        <div class=\"col-md-4\">
          <a class=\"d-block p-3 border rounded text-decoration-none text-body h-100\" href=\"{{ url_for(action.endpoint) }}\">
            <i class=\"bi bi-{{ action.icon }} fs-3 text-{{ action.color }}\"></i>
            <h2 class=\"h6 mt-2 mb-1\">{{ action.title }}</h2>
            <p class=\"small text-muted mb-0\">{{ action.description }}</p>
          </a>
        </div>
      {% endfor %}
    </div>
  </div>
</section>
{% endblock %}
"""

APPOINTMENTS = """{% extends "layout.html" %}
{% block title %}Appointments - MediTrack{% endblock %}
{% block content %}
{% macro appointment_card(appointment, actions) %}
  <div class=\"p-4 mb-3 border rounded {% if not actions %}bg-light{% endif %}\">
    <div class=\"d-flex justify-content-between align-items-center\">
      <div>
        <div class=\"d-flex align-items-center gap-2 mb-2\">
          <h3 class=\"h5 mb-0\">{{ appointment.doctor_name }}</h3>
          <span class=\"badge text-bg-{{ appointment_badges[appointment.status] }}\">{{ appointment.status }}</span>
        </div>
        <p class=\"text-muted mb-2\">{{ appointment.reason }}</p>
        <div class=\"small text-muted\">
          <span class=\"me-3\"><i class=\"bi bi-calendar\"></i> {{ appointment.appointment_date|display_date }}</span>
          <span><i class=\"bi bi-clock\"></i> {{ appointment.appointment_time|display_time }}</span>
        </div>
      </div>
      {% if actions %}
        <div class=\"d-flex gap-2\">
          <form method=\"post\" action=\"{{ url_for('complete_appointment', appointment_id=appointment.appointment_id) }}\">
            <button type=\"submit\" class=\"btn btn-outline-success btn-sm\"><i class=\"bi bi-check2\"></i> Mark Completed</button>
          </form>
          <form method=\"post\" action=\"{{ url_for('cancel_appointment', appointment_id=appointment.appointment_id) }}\">
            <button type=\"submit\" class=\"btn btn-outline-danger btn-sm\"><i class=\"bi bi-trash\"></i> Cancel</button>
          </form>
        </div>
      {% endif %}
    </div>
  </div>
{% endmacro %}
<div class=\"d-flex justify-content-between align-items-center mb-4\">
  <div>
    <h1 class=\"h2 fw-bold\">Appointments</h1>
    <p class=\"text-muted mb-0\">Manage your medical appointments and consultations</p>
  </div>
  <button type=\"button\" class=\"btn btn-primary\" data-bs-toggle=\"modal\" data-bs-target=\"#bookAppointment\">
    <i class=\"bi bi-plus-lg\"></i> Book Appointment
  </button>
</div>

<div class=\"modal fade\" id=\"bookAppointment\" tabindex=\"-1\" aria-labelledby=\"bookAppointmentTitle\" aria-hidden=\"true\">
  <div class=\"modal-dialog\">
    <form class=\"modal-content\" method=\"post\" action=\"{{ url_for('appointments') }}\">
      <div class=\"modal-header\">
        <div>
          <h2 class=\"modal-title h5\" id=\"bookAppointmentTitle\">Book New Appointment</h2>
          <p class=\"text-muted small mb-0\">Schedule a new medical appointment</p>
        </div>
        <button type=\"button\" class=\"btn-close\" data-bs-dismiss=\"modal\" aria-label=\"Close\"></button>
      </div>
      <div class=\"modal-body\">
        <div class=\"mb-3\">
          <label for=\"doctorName\" class=\"form-label\">Doctor Name</label>
          <input id=\"doctorName\" name=\"doctor_name\" class=\"form-control\" placeholder=\"Enter doctor's name\" value=\"\" required>
        </div>
        <div class=\"row g-3 mb-3\">
          <div class=\"col\">
            <label for=\"appointmentDate\" class=\"form-label\">Date</label>
            <input id=\"appointmentDate\" name=\"appointment_date\" type=\"date\" class=\"form-control\" value=\"\" required>
          </div>
          <div class=\"col\">
            <label for=\"appointmentTime\" class=\"form-label\">Time</label>
            <input id=\"appointmentTime\" name=\"appointment_time\" type=\"time\" class=\"form-control\" value=\"\" required>
          </div>
        </div>
        <div class=\"mb-3\">
          <label for=\"reason\" class=\"form-label\">Reason for Visit</label>
          <input id=\"reason\" name=\"reason\" class=\"form-control\" placeholder=\"Brief description of the visit\" value=\"\" required>
        </div>
      </div>
      <div class=\"modal-footer\">
        <button type=\"button\" class=\"btn btn-outline-secondary\" data-bs-dismiss=\"modal\">Cancel</button>
        <button type=\"submit\" class=\"btn btn-primary\">Book Appointment</button>
      </div>
    </form>
  </div>
</div>

<section class=\"card shadow-sm mb-4\">
  <div class=\"card-header\">Upcoming Appointments</div>
  <div class=\"card-body\">
    <p class=\"text-muted small\">Your scheduled medical appointments</p>
    {% for appointment in upcoming %}
      {{ appointment_card(appointment, true) }}
    {% else %}
      <div class=\"text-center py-5\">
        <i class=\"bi bi-calendar display-5 text-secondary\"></i>
        <p class=\"text-muted mt-3 mb-1\">No upcoming appointments</p>
        <p class=\"small text-secondary mb-0\">Book your first appointment to get started</p>
      </div>
    {% endfor %}
  </div>
</section>

{% if past %}
  <section class=\"card shadow-sm\">
    <div class=\"card-header\">Past Appointments</div>
    <div class=\"card-body\">
      <p class=\"text-muted small\">Your appointment history</p>
      {% for appointment in past %}
        {{ appointment_card(appointment, false) }}
      {% endfor %}
    </div>
  </section>
{% endif %}
{% endblock %}
"""

PRESCRIPTIONS = """{% extends "layout.html" %}
{% block title %}Prescriptions - MediTrack{% endblock %}
{% block content %}
{% macro prescription_card(prescription, actions) %}
  <div class=\"p-4 mb-3 border rounded {% if not actions %}bg-light{% endif %}\">
    <div class=\"d-flex justify-content-between align-items-start\">
      <div class=\"flex-grow-1\">
        <div class=\"d-flex align-items-center gap-2 mb-3\">
          <h3 class=\"h5 mb-0\">{{ prescription.medicine_name }}</h3>
          <span class=\"badge text-bg-{{ prescription_badges[prescription.status] }}\">{{ prescription.status }}</span>
        </div>
        <div class=\"row small text-muted mb-3\">
          <div class=\"col-md-4\"><i class=\"bi bi-capsule\"></i> <strong>Dosage:</strong> {{ prescription.dosage }}</div>
          <div class=\"col-md-4\"><i class=\"bi bi-clock\"></i> <strong>Frequency:</strong> {{ prescription.frequency }}</div>
          <div class=\"col-md-4\"><i class=\"bi bi-activity\"></i> <strong>Duration:</strong> {{ prescription.start_date|display_date }} - {{ prescription.end_date|display_date }}</div>
        </div>
        {% if prescription.instructions %}
          <div class=\"p-3 rounded {% if actions %}bg-primary-subtle text-primary-emphasis{% else %}bg-body-secondary{% endif %}\">
            <p class=\"small mb-0\"><strong>Instructions:</strong> {{ prescription.instructions }}</p>
          </div>
        {% endif %}
      </div>
      {% if actions %}
        <div class=\"d-flex flex-column gap-2 ms-4\">
          <form method=\"post\" action=\"{{ url_for('complete_prescription', prescription_id=prescription.prescription_id) }}\">
            <button type=\"submit\" class=\"btn btn-outline-primary btn-sm w-100\"><i class=\"bi bi-check2\"></i> Mark Completed</button>
          </form>
          <form method=\"post\" action=\"{{ url_for('discontinue_prescription', prescription_id=prescription.prescription_id) }}\">
            <button type=\"submit\" class=\"btn btn-outline-danger btn-sm w-100\"><i class=\"bi bi-trash\"></i> Discontinue</button>
          </form>
        </div>
      {% endif %}
    </div>
  </div>
{% endmacro %}
<div class=\"d-flex justify-content-between align-items-center mb-4\">
  <div>
    <h1 class=\"h2 fw-bold\">Prescriptions</h1>
    <p class=\"text-muted mb-0\">Manage your medications and prescription schedules</p>
  </div>
  <button type=\"button\" class=\"btn btn-primary\" data-bs-toggle=\"modal\" data-bs-target=\"#addPrescription\">
    <i class=\"bi bi-plus-lg\"></i> Add Prescription
  </button>
</div>

<div class=\"modal fade\" id=\"addPrescription\" tabindex=\"-1\" aria-labelledby=\"addPrescriptionTitle\" aria-hidden=\"true\">
  <div class=\"modal-dialog\">
    <form class=\"modal-content\" method=\"post\" action=\"{{ url_for('prescriptions') }}\">
      <div class=\"modal-header\">
        <div>
          <h2 class=\"modal-title h5\" id=\"addPrescriptionTitle\">Add New Prescription</h2>
          <p class=\"text-muted small mb-0\">Add a new medication to your prescription list</p>
        </div>
        <button type=\"button\" class=\"btn-close\" data-bs-dismiss=\"modal\" aria-label=\"Close\"></button>
      </div>
      <div class=\"modal-body\">
        <div class=\"mb-3\">
          <label for=\"medicineName\" class=\"form-label\">Medicine Name</label>
          <input id=\"medicineName\" name=\"medicine_name\" class=\"form-control\" placeholder=\"Enter medicine name\" value=\"\" required>
        </div>
        <div class=\"row g-3 mb-3\">
          <div class=\"col\">
            <label for=\"dosage\" class=\"form-label\">Dosage</label>
            <input id=\"dosage\" name=\"dosage\" class=\"form-control\" placeholder=\"e.g., 10mg\" value=\"\" required>
          </div>
          <div class=\"col\">
            <label for=\"frequency\" class=\"form-label\">Frequency</label>
            <input id=\"frequency\" name=\"frequency\" class=\"form-control\" placeholder=\"e.g., Twice daily\" value=\"\" required>
          </div>
        </div>
        <div class=\"row g-3 mb-3\">
          <div class=\"col\">
            <label for=\"startDate\" class=\"form-label\">Start Date</label>
            <input id=\"startDate\" name=\"start_date\" type=\"date\" class=\"form-control\" value=\"\" required>
          </div>
          <div class=\"col\">
            <label for=\"endDate\" class=\"form-label\">End Date</label>
            <input id=\"endDate\" name=\"end_date\" type=\"date\" class=\"form-control\" value=\"\" required>
          </div>
        </div>
        <div class=\"mb-3\">
          <label for=\"instructions\" class=\"form-label\">Instructions</label>
          <input id=\"instructions\" name=\"instructions\" class=\"form-control\" placeholder=\"Special instructions (optional)\" value=\"\">
        </div>
      </div>
      <div class=\"modal-footer\">
        <button type=\"button\" class=\"btn btn-outline-secondary\" data-bs-dismiss=\"modal\">Cancel</button>
        <button type=\"submit\" class=\"btn btn-primary\">Add Prescription</button>
      </div>
    </form>
  </div>
</div>

<section class=\"card shadow-sm mb-4\">
  <div class=\"card-header\">Active Prescriptions</div>
  <div class=\"card-body\">
    <p class=\"text-muted small\">Your current medications and schedules</p>
    {% for prescription in active %}
      {{ prescription_card(prescription, true) }}
    {% else %}
      <div class=\"text-center py-5\">
        <i class=\"bi bi-capsule display-5 text-secondary\"></i>
        <p class=\"text-muted mt-3 mb-1\">No active prescriptions</p>
        <p class=\"small text-secondary mb-0\">Add your first prescription to get started</p>
      </div>
    {% endfor %}
  </div>
</section>

{% if inactive %}
  <section class=\"card shadow-sm\">
    <div class=\"card-header\">Past Prescriptions</div>
    <div class=\"card-body\">
      <p class=\"text-muted small\">Your prescription history</p>
      {% for prescription in inactive %}
        {{ prescription_card(prescription, false) }}
      {% endfor %}
    </div>
  </section>
{% endif %}
{% endblock %}
"""

TEMPLATES: Dict[str, str] = {
    "layout.html": LAYOUT,
    "public_layout.html": PUBLIC_LAYOUT,
    "landing.html": LANDING,
    "login.html": LOGIN,
    "register.html": REGISTER,
    "dashboard.html": DASHBOARD,
    "appointments.html": APPOINTMENTS,
    "prescriptions.html": PRESCRIPTIONS,
}
