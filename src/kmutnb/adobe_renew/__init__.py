"""Adobe Renew: KMUTNB Software Portal Automation Tool.

This package logs in to the KMUTNB software portal and submits an Adobe
license renewal request with an expiry date at the start of next month.
"""
