"""Sample vault export shared by the tests."""
import textwrap

# base64 of "0123456789abcdef" and "ciphertextblock!"
IV_B64 = "MDEyMzQ1Njc4OWFiY2RlZg=="
IV_HEX = "30313233343536373839616263646566".upper()
CT_B64 = "Y2lwaGVydGV4dGJsb2NrIQ=="
CT_HEX = "63697068657274657874626c6f636b21".upper()

EXAMPLE_COM_HEX = "68747470733a2f2f6578616d706c652e636f6d"
ALPHA_EXAMPLE_ORG_HEX = "68747470733a2f2f616c7068612e6578616d706c652e6f7267"

VAULT_XML = textwrap.dedent(
    f"""\
    <?xml version="1.0" encoding="UTF-8"?>
    <response>
      <accounts cbc="1">
        <account name="!{IV_B64}|{CT_B64}" urid="0" id="1001" url="{EXAMPLE_COM_HEX}"
                 group="" extra="ecbNotes==" isbookmark="0" never_autofill="1"
                 last_touch="1700000000" last_modified="0" launch_count="3" sn="0">
          <login urid="0" url="{EXAMPLE_COM_HEX}" u="" p="!{IV_B64}|{CT_B64}" o="" method=""/>
        </account>
        <account name="ecbName==" id="1002" url="{ALPHA_EXAMPLE_ORG_HEX}" group="!broken"
                 extra="" isbookmark="1" never_autofill="0"
                 last_touch="yesterday" last_modified="1700000000" launch_count="0" sn="1">
          <login u="ecbUser==" p="!{IV_B64}"/>
        </account>
        <account id="1003" url="zz12"/>
      </accounts>
    </response>
    """
)


