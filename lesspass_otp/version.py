"""LessPass OTP Meta information.
   LessPass OTP derives site passwords, OTP tokens and master password
   fingerprints from a single master password.
"""
__title__ = 'lesspass_otp'
__description__ = (
   'Stateless password derivation (LessPass compatible), '
   'HOTP/TOTP tokens and encrypted OTP seeds.'
)
__version__ = '0.3.0'
__copyright__ = 'Copyright (c) 2021 LessPass OTP contributors'
__author__ = 'LessPass OTP contributors'
__license__ = 'Apache-2.0'
