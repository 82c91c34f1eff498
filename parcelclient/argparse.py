import os


def addArgumentParserBaseFlags(parser, logfileName):
    '''
    Adds the flags shared by all parcelclient scripts.

    Provides ALL flags required by the Config class.
    '''
    parser.add_argument(
        "-d",
        "--state-dir",
        dest='stateDir',
        metavar="DIR",
        help="Specify state directory (default='%(default)s')",
        default=os.getenv('PARCEL_STATE_DIR', "~/.local/share/parcel"))
    parser.add_argument("--rc-file", dest="rcFile",
                        help="Specify path to rc-file (default=\"%(default)s\")",
                        default="~/.config/parcelrc")
    parser.add_argument("--api-url", dest="apiUrl", metavar="URL",
                        help="API root URL (overrides rc-file and PARCEL_API_URL)")
    parser.add_argument("--token", dest="apiToken",
                        help="API bearer token (overrides rc-file and "
                        "PARCEL_API_TOKEN)")
    parser.add_argument(
        "--debug",
        action="store_true",
        help="enable debug output to <state-dir>/log/%s.log" % logfileName)
    parser.add_argument("--debug-file", dest="debugFile", metavar="FILE",
                        help="enable debug output to FILE instead")
