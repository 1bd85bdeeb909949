"""Canned USPS Verify responses."""

CONFIRMED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<AddressValidateResponse><Address ID="0">
<Address2>123 MAIN ST</Address2><City>SPRINGFIELD</City><State>IL</State>
<Zip5>62704</Zip5><Zip4>1234</Zip4><DeliveryPoint>23</DeliveryPoint>
<CarrierRoute>C001</CarrierRoute><Footnotes>N</Footnotes>
<DPVConfirmation>Y</DPVConfirmation><DPVCMRA>N</DPVCMRA>
<DPVFootnotes>AABB</DPVFootnotes><Business>N</Business>
<CentralDeliveryPoint>N</CentralDeliveryPoint><Vacant>N</Vacant>
</Address></AddressValidateResponse>"""

UNCONFIRMED_XML = """<?xml version="1.0" encoding="UTF-8"?>
<AddressValidateResponse><Address ID="0">
<Address2>123 MAIN ST</Address2><City>SPRINGFIELD</City><State>IL</State>
<Zip5>62704</Zip5><DPVConfirmation>N</DPVConfirmation>
<DPVFootnotes>AAM3</DPVFootnotes>
</Address></AddressValidateResponse>"""

ADDRESS_NOT_FOUND_XML = """<AddressValidateResponse><Address ID="0"><Error>
<Number>-2147219401</Number><Description>Address Not Found.</Description>
</Error></Address></AddressValidateResponse>"""
