"""
Shared test fixtures for the tl1 test suite.
"""

from textwrap import dedent

import pytest

EQPT_FORMAT = "<aid>:<type>:ID=<id>,C1=<custom1>,C2=<custom2>,C3=<custom3>:<pst>,<sst>"

ALM_FORMAT = (
    "<aid>,<aidtype>:"
    "<ntfcncde>,<condtype>,<srveff>,<ocrdat>,<ocrtim>,<locn>,<dirn>,<tmper>:"
    "<conddescr>,<aiddet>,<obsdbhvr>,<exptdbhvr>:"
    "<dgntype>,<tblislt>"
)

INV_FORMAT = ":".join(
    [
        "<aid>,<aidtype>",
        ",".join(
            [
                "NAME=<name>",
                "PEC=<pec>",
                "CLEI=<clei>",
                "FNAME=<fname>",
                "SER=<ser>",
                "HWREV=<hwrev>",
                "FW=<fw>",
                "MFGDAT=<mfgdat>",
                "MFGLOCN=<mfglocn>",
                "TSTDAT=<tstdat>",
                "TSTLOCN=<tstlocn>",
                "WAVELENGTH=<wavelength>",
                "REACH=<reach>",
                "MINBR=<minbr>",
                "MAXBR=<maxbr>",
                "ENCODING=<encoding>",
                "CONNTYPE=<conntype>",
                "VENDORNAME=<vendorname>",
                "VENDORPN=<vendorpn>",
                "VENDOROUI=<vendoroui>",
                "TXFAULTIMP=<txfaultimp>",
                "TXDISABLEIMP=<txdisableimp>",
                "LOSIMP=<losimp>",
                "DDIAGIMP=<ddiagimp>",
                "MEDIA=<media>",
                "USI=<usi>",
            ]
        ),
    ]
)


@pytest.fixture
def eqpt_output():
    """RTRV-EQPT response with a single block of eleven records."""
    return dedent(
        """\
        RTRV-EQPT;

           bti7200hoge 17-08-31 16:29:53
        M  100 COMPLD
           "MS-1:BT7A51AR::IS-NR,"
           "SCP-1-1:BT7A20CA::IS-NR,"
           "DCM-1-2:BT7A12JA::IS-NR,"
           "TPR-1-8:BT7A49AA::IS-NR,"
           "TPR-1-9:BT7A49AA::IS-NR,"
           "TPR-1-10:BT7A49AA::IS-NR,"
           "ES-11:BT7A51AR::IS-NR,"
           "TPR-11-1:BT7A49AA::IS-NR,"
           "TPR-11-17:BT7A49AA::IS-NR,"
           "D40MD-0-1:BT7A37AA:C2=blah:,"
           "D40MD-0-2:BT7A37AA::,"
        ;
        BTI7000>
        """
    )


@pytest.fixture
def alm_output():
    """RTRV-ALM-ALL response with escaped quoted strings, some holding delimiters."""
    return dedent(
        r"""
        RTRV-ALM-ALL;

           bti7200hoge 17-09-06 11:45:28
        M  100 COMPLD
           "XFP-11-12-3,EQPT:CR,REPLUNITMISS,SA,08-16,04-04-05,NEND,,:\"XFP: missing.\",,,:,"
           "XFP-11-12-4,EQPT:CR,REPLUNITMISS,SA,08-16,04-04-05,NEND,,:\"XFP missing.\",,,:,"
           "TPR-11-13-4,XCVR:CR,LOS,SA,08-16,04-04-01,NEND,,:\"Loss, of signal.\",,,:,"
        ;
        BTI7000>
        """
    )


@pytest.fixture
def inv_output():
    """RTRV-INV response split over two blocks by a continuation marker."""
    return dedent(
        r"""
        IP 100
        <

           bti7200hoge 17-09-12 12:48:35
        M  100 COMPLD
           "MS-1,EQPT:NAME=MS7200,PEC=11111111,CLEI=UNKNOWN,FNAME=\"Main Shelf 7200\",SER=\"2222222222\",HWREV=\"A\",MFGDAT=\"2017-09-10\",MFGLOCN=33,TSTDAT=2017-09-11,TSTLOCN=19,USI=N/A,"
        >

           bti7200hoge 17-09-12 12:48:35
        M  100 COMPLD
           "XFP-1-9-3,EQPT:PEC=44444444444,SER=\"5555555\",HWREV=\"66\",MFGDAT=\"2017-09-12\",WAVELENGTH=1010.10,REACH=77,MINBR=8888,MAXBR=99999,ENCODING=UNKNOWN,CONNTYPE=LC,VENDORNAME=\"ACME CORP.\",VENDORPN=\"AAAAAAAAAAAAAAA\",VENDOROUI=\"BBBBBB\",TXFAULTIMP=Y,TXDISABLEIMP=Y,LOSIMP=Y,DDIAGIMP=Y,MEDIA=OPTICAL,USI=N/A,"
        ;
        """
    )


@pytest.fixture
def eqpt_format():
    return EQPT_FORMAT


@pytest.fixture
def alm_format():
    return ALM_FORMAT


@pytest.fixture
def inv_format():
    return INV_FORMAT
