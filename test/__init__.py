from rdflib_dataobjects import registerplugins

registerplugins()
