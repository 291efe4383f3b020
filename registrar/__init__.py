"""
Registrar: a minimal student course-registration application.

Students register, log in, browse a fixed catalog of sample courses and
maintain their personal enrollment list through full-list replacement.
"""

__version__ = "1.0.0"
__author__ = "Registrar Development Team"
__description__ = "Student course-registration service and client"
