"""Night slip tracker package.

Organized by feature modules (members, dates, attendance, mirror, auth) with a
thin Flask controller layer over service/repository layers.
"""
