"""z/OSMF jobs REST constants."""

RESOURCE = "/zosmf/restjobs/jobs"
FILE_DELIM = "/"
RESOURCE_SPOOL_FILES = "/files"
RESOURCE_SPOOL_CONTENT = "/records"
RESOURCE_JCL_CONTENT = "/files/JCL/records"

# query parameter names
QUERY_OWNER = "owner"
QUERY_PREFIX = "prefix"
QUERY_JOBID = "jobid"
QUERY_MAX_JOBS = "max-jobs"
STEP_DATA = "step-data"

DEFAULT_MAX_JOBS = 1000
DEFAULT_OWNER = "*"
DEFAULT_PREFIX = "*"

# modify version: 1.0 asks for asynchronous processing, 2.0 for synchronous
DEFAULT_MODIFY_VERSION = "2.0"
MODIFY_VERSIONS = ("1.0", "2.0")

# headers
X_IBM_JOB_MODIFY_VERSION = "X-IBM-Job-Modify-Version"
X_IBM_JCL_SYMBOL_PREFIX = "X-IBM-JCL-Symbol-"
X_IBM_INTRDR_CLASS = "X-IBM-Intrdr-Class"
X_IBM_INTRDR_RECFM = "X-IBM-Intrdr-Recfm"
X_IBM_INTRDR_LRECL = "X-IBM-Intrdr-Lrecl"
X_IBM_INTRDR_MODE = "X-IBM-Intrdr-Mode"

DEFAULT_INTRDR_CLASS = "A"
DEFAULT_INTRDR_RECFM = "F"
DEFAULT_INTRDR_LRECL = 80
