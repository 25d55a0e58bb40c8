""" All Application Constants declare here... """

# Python Packages
from decouple import config, Csv


# App Constants
APP_ENV                         =   config('APP_ENV', default = 'development')
APP_SECRET_KEY                  =   config('APP_SECRET_KEY', default = 'dev-secret-change-me')
LOG_LEVEL                       =   config('LOG_LEVEL', default = 'INFO')
CORS_ALLOWED_ORIGINS            =   config(
                                        'CORS_ALLOWED_ORIGINS',
                                        default = 'http://localhost:3000',
                                        cast = Csv()
                                    )


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "Fund Connect",
                                "version": "1.0",
                                "description": "Connects fund placement agents with \
                                investors: fund profiles, expressions of interest, \
                                agent/investor messaging and unread notifications."
                            }


# Database Constants
# DATABASE_URL wins over the individual DB_* parts when it is set
DATABASE_URL                    =   config('DATABASE_URL', default = '')
DB_HOST                         =   config('DB_HOST', default = 'localhost')
DB_PORT                         =   config('DB_PORT', default = '5432')
DB_NAME                         =   config('DB_NAME', default = 'fundconnect')
DB_USER                         =   config('DB_USER', default = 'postgres')
DB_PASSWORD                     =   config('DB_PASSWORD', default = 'postgres')


# AWS Constants (service-role tier, used server side only)
AWS_ACCESS_KEY_ID		        =	config('AWS_ACCESS_KEY_ID', default = '')
AWS_SECRET_ACCESS_KEY	        =	config('AWS_SECRET_ACCESS_KEY', default = '')
AWS_REGION				        =	config('AWS_REGION', default = 'us-east-1')
AWS_S3_BUCKET_NAME	            =	config('AWS_S3_BUCKET_NAME', default = 'fund-documents')
AWS_S3_PUBLIC_BUCKET            =   config('AWS_S3_PUBLIC_BUCKET', default = True, cast = bool)
STORAGE_MAX_UPLOAD_BYTES        =   config('STORAGE_MAX_UPLOAD_BYTES', default = 50 * 1024 * 1024, cast = int)


# Mail Constants (SMTP; an empty SMTP_HOST disables delivery)
SMTP_HOST                       =   config('SMTP_HOST', default = '')
SMTP_PORT                       =   config('SMTP_PORT', default = 587, cast = int)
SMTP_USER                       =   config('SMTP_USER', default = '')
SMTP_PASSWORD                   =   config('SMTP_PASSWORD', default = '')
SMTP_USE_TLS                    =   config('SMTP_USE_TLS', default = True, cast = bool)
MAIL_FROM                       =   config('MAIL_FROM', default = 'no-reply@fundconnect.local')
APP_BASE_URL                    =   config('APP_BASE_URL', default = 'http://localhost:3000')


# Account Constants
EMAIL_VERIFICATION_MAX_AGE      =   config('EMAIL_VERIFICATION_MAX_AGE', default = 24 * 60 * 60, cast = int)
INVITATION_CODE_TTL_DAYS        =   config('INVITATION_CODE_TTL_DAYS', default = 30, cast = int)


# Messaging / Notification Constants
UNREAD_MESSAGE_WINDOW           =   config('UNREAD_MESSAGE_WINDOW', default = 5, cast = int)
UNREAD_COUNT_MODE               =   config('UNREAD_COUNT_MODE', default = 'window')     # window | exact
UNREAD_SELF_REPLY_CLEARS        =   config('UNREAD_SELF_REPLY_CLEARS', default = False, cast = bool)
NOTIFICATION_DEBOUNCE_SECONDS   =   config('NOTIFICATION_DEBOUNCE_SECONDS', default = 0.5, cast = float)
NOTIFICATION_INCREMENTAL        =   config('NOTIFICATION_INCREMENTAL', default = False, cast = bool)
NOTIFICATION_STREAM_KEEPALIVE   =   config('NOTIFICATION_STREAM_KEEPALIVE', default = 15, cast = int)
CONVERSATION_MESSAGES_LIMIT     =   config('CONVERSATION_MESSAGES_LIMIT', default = 100, cast = int)


# Interest Constants
INTEREST_DUPLICATE_POLICY       =   config('INTEREST_DUPLICATE_POLICY', default = 'allow')   # allow | reject


# User Roles
ROLE_AGENT                      =   "agent"
ROLE_INVESTOR                   =   "investor"
ROLE_ADMIN                      =   "admin"
USER_ROLES                      =   (ROLE_AGENT, ROLE_INVESTOR, ROLE_ADMIN)


# Fund Document Types
FUND_DOCUMENT_TYPES             =   ("pitch_deck", "ppm", "term_sheet", "track_record", "other")
FUND_DOCUMENT_EXTENSIONS        =   {"pdf", "docx", "xlsx", "pptx"}
