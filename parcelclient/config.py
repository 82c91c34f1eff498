import configparser
import os

from parcelclient.http import DEFAULT_API_URL, RequestsHttpClient

RC_FILE_HELP = """\
Sample rcfile:
    [api]
    url = https://api.oasislabs.com/parcel/v1
    token = <bearer token>
    [http]
    timeout = 30  # seconds, default=no timeout
    [output]
    format = json|summary  # default=summary

Environment:
    PARCEL_API_URL and PARCEL_API_TOKEN override the [api] settings.
"""


class ConfigEnum(object):
    __slots__ = (
        'defaultName',
        '_enumVals',
    )

    def __init__(self, default, **enumVals):
        self._enumVals = enumVals
        assert default in enumVals
        self.defaultName = default
        for enumName in enumVals:
            assert enumName not in self.__slots__

    def values(self):
        return iter(self._enumVals.values())

    @property
    def defaultVal(self):
        return self._enumVals[self.defaultName]

    def __getattr__(self, attr):
        assert attr != '_enumVals'
        if attr in self._enumVals:
            return self._enumVals[attr]
        else:
            return object.__getattribute__(self, attr)


OUTPUT_FORMAT = ConfigEnum(
    'SUMMARY',  # default
    JSON='json',
    SUMMARY='summary',
)


class ConfigError(Exception):
    pass


def _getConfig(cfgParser, section, option, defaultValue=None):
    if not cfgParser.has_section(section):
        return defaultValue
    if not cfgParser.has_option(section, option):
        return defaultValue
    return cfgParser.get(section, option)


def _getEnumConfig(cfgParser, section, option, enum):
    optionVal = _getConfig(
        cfgParser, section, option, enum.defaultVal)
    if optionVal not in list(enum.values()):
        raise ConfigError(
            "RC file has invalid \"{section}.{option}\" setting {optionVal}.  Valid "
            "options: {allowedVals}".format(
                section=section,
                option=option,
                optionVal=optionVal,
                allowedVals=", ".join(list(enum.values()))))

    return optionVal


def _getFloatConfig(cfgParser, section, option, default):
    val = _getConfig(cfgParser, section, option, None)
    if val is None:
        return default
    try:
        return float(val)
    except ValueError:
        raise ConfigError(
            "RC file has invalid \"{section}.{option}\" setting {optionVal}.  "
            "Expected a number of seconds".format(
                section=section,
                option=option,
                optionVal=val)) from None


class Config(object):
    validConfig = {
        'api': {'url', 'token'},
        'http': {'timeout'},
        'output': {'format'},
    }

    def _validateConfigParser(self, cfgParser):
        cfgSections = set(cfgParser.sections())
        unknownSections = cfgSections - set(self.validConfig.keys())
        if unknownSections:
            raise ConfigError(
                "RC file has unknown configuration sections: {}".format(
                    ", ".join(sorted(unknownSections))))
        for section in cfgSections:
            cfgValues = set(cfgParser.options(section))
            unknownOptions = cfgValues - self.validConfig[section]
            if unknownOptions:
                raise ConfigError(
                    "RC file has unknown configuration options in "
                    "section \"{}\": {}".format(
                        section, ", ".join(sorted(unknownOptions))))

    def __init__(self, options):
        stateDir = options.stateDir
        self.options = options
        self._logDir = os.path.expanduser(stateDir) + "/log/"

        rcFile = os.path.expanduser(options.rcFile)
        cfgParser = configparser.RawConfigParser()
        cfgParser.read(rcFile)
        self._validateConfigParser(cfgParser)

        self._apiUrl = (
            getattr(options, 'apiUrl', None)
            or os.getenv('PARCEL_API_URL')
            or _getConfig(cfgParser, 'api', 'url', DEFAULT_API_URL))
        self._apiToken = (
            getattr(options, 'apiToken', None)
            or os.getenv('PARCEL_API_TOKEN')
            or _getConfig(cfgParser, 'api', 'token'))
        self._httpTimeout = _getFloatConfig(cfgParser, 'http', 'timeout', None)
        self._outputFormat = _getEnumConfig(
            cfgParser, 'output', 'format', OUTPUT_FORMAT)

    @staticmethod
    def checkDir(dirName):
        if not os.access(dirName, os.W_OK | os.X_OK | os.R_OK):
            os.makedirs(dirName)
        return dirName

    @property
    def logDir(self):
        return self.checkDir(self._logDir)

    @property
    def apiUrl(self):
        return self._apiUrl

    @property
    def apiToken(self):
        return self._apiToken

    @property
    def httpTimeout(self):
        return self._httpTimeout

    @property
    def outputJson(self):
        return self._outputFormat == OUTPUT_FORMAT.JSON

    def httpClient(self):
        return RequestsHttpClient(
            api_url=self.apiUrl, token=self.apiToken, timeout=self.httpTimeout)
