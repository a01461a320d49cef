"""
Command catalog for BTI 7000/7200 series network elements.
"""

from tl1.commands.command import Command

ACT_USER = Command("ACT-USER::<username>:::<password>")
CANC_USER = Command("CANC-USER::<username>")

RTRV_EQPT_ALL = Command(
    "RTRV-EQPT",
    "<aid>:<type>:ID=<id>,C1=<custom1>,C2=<custom2>,C3=<custom3>:pst,sst",
)

RTRV_INV_ALL = Command(
    "RTRV-INV",
    ":".join(
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
                    "WAVELENGTHMIN=<wavelengthmin>",
                    "WAVELENGTHMAX=<wavelengthmax>",
                    "WAVELENGTHSPACING=<wavelengthspacing>",
                    "REACH=<reach>",
                    "MINBR=<minbr>",
                    "MAXBR=<maxbr>",
                    "NOMBR=<nombr>",
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
                    "TEMPHT=<tempht>",
                    "TEMPHTS=<temphts>",
                ]
            ),
        ]
    ),
)

RTRV_ALM_ALL = Command(
    "RTRV-ALM-ALL",
    ":".join(
        [
            "<aid>,<aidtype>",
            "<ntfcncde>,<condtype>,<srveff>,<ocrdat>,<ocrtim>,<locn>,<dirn>,<tmper>",
            "<conddescr>,<aiddet>,<obsdbhvr>,<exptdbhvr>",
            "<dgntype>,<tblislt>",
        ]
    ),
)

RTRV_CRS_WCH = Command(
    "RTRV-CRS-WCH",
    "<from_aid>,<to_aid>::SERVICENAME=<service_name>",
)

RTRV_CRS_XCVR = Command(
    "RTRV-CRS-XCVR",
    "<src_aid>,<dst_aid>:<ctype>",
)

RTRV_CONN_EQPT = Command(
    "RTRV-CONN-EQPT",
    "<fromAid>,<toAid>:<type>",
)

RTRV_WDM = Command(
    "RTRV-WDM",
    ":".join(
        [
            "<aid>",
            "",
            ",".join(
                [
                    "ID=<id>",
                    "C1=<custom1>",
                    "C2=<custom2>",
                    "C3=<custom3>",
                    "FIBER=<fiber>",
                    "SPANLEN=<spanlen>",
                    "SPANLOSSSPECMAX=<spanlossspecmax>",
                    "SPANLOSSRX-HT=<spanlossrx-ht>",
                    "NUMCHNLS=<numchnls>",
                    "AINSTMR=<ainstmr>",
                    "ACTAINSTMR=<actainstmr>",
                ]
            ),
            "<pst>,<sst>",
        ]
    ),
)

RTRV_ROUTE_CONN = Command(
    "RTRV-ROUTE-CONN",
    ":".join(
        [
            "",
            "<ipaddr>,<mask>,<nexthop>",
            ",".join(
                [
                    "COST=<cost>",
                    "ADMINDIST=<admindist>",
                    "TYPE=<type>",
                    "PROT=<prot>",
                    "AGE=<age>",
                    "PREFSTAT=<prefstat>",
                ]
            ),
        ]
    ),
)

COMMANDS = {
    "ACT-USER": ACT_USER,
    "CANC-USER": CANC_USER,
    "RTRV-EQPT": RTRV_EQPT_ALL,
    "RTRV-INV": RTRV_INV_ALL,
    "RTRV-ALM-ALL": RTRV_ALM_ALL,
    "RTRV-CRS-WCH": RTRV_CRS_WCH,
    "RTRV-CRS-XCVR": RTRV_CRS_XCVR,
    "RTRV-CONN-EQPT": RTRV_CONN_EQPT,
    "RTRV-WDM": RTRV_WDM,
    "RTRV-ROUTE-CONN": RTRV_ROUTE_CONN,
}
